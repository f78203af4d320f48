"""Core module for drawing history."""
from .drawing_action import DrawingAction, CudOperation, ActionStatus, take_snapshot, apply_snapshot
from .entity_host import EntityHost, CallbackHost
from .history_manager import HistoryManager
from .signal_hub import SignalHub, get_signal_hub

__all__ = [
    'DrawingAction',
    'CudOperation',
    'ActionStatus',
    'take_snapshot',
    'apply_snapshot',
    'EntityHost',
    'CallbackHost',
    'HistoryManager',
    'SignalHub',
    'get_signal_hub'
]
