"""Shared settings for the history system."""
from .history_config import HistoryConfig, DEFAULT_MAX_ACTIONS

__all__ = ['HistoryConfig', 'DEFAULT_MAX_ACTIONS']
