"""
Selective undo/redo for drawing entities.

Tracks per-entity before/after snapshots and lets the editor undo or redo
them, optionally restricted to the currently selected entities.
"""
from .errors import HistoryError, SnapshotError, ConfigError
from .core import (
    DrawingAction, CudOperation, ActionStatus,
    EntityHost, CallbackHost, HistoryManager,
    SignalHub, get_signal_hub
)
from .common import HistoryConfig

__version__ = "1.0.0"

__all__ = [
    'HistoryError',
    'SnapshotError',
    'ConfigError',
    'DrawingAction',
    'CudOperation',
    'ActionStatus',
    'EntityHost',
    'CallbackHost',
    'HistoryManager',
    'SignalHub',
    'get_signal_hub',
    'HistoryConfig'
]
