"""
Signal Hub for drawing history.

Central event dispatcher that decouples the history manager from UI code.
Uses Qt signals so menus, toolbars and the canvas can follow undo/redo
without direct references to the manager.
"""

from PySide6.QtCore import QObject, Signal
from typing import Any, Optional


class SignalHub(QObject):
    """
    Centralized signal dispatcher for drawing history.

    Also acts as an EntityHost: create/delete requests coming from undo/redo
    are re-emitted as signals, so the canvas can connect slots to them.
    """

    # History signals
    history_changed = Signal(bool, bool, str, str)  # (can_undo, can_redo, undo_desc, redo_desc)
    action_undone = Signal(object)    # Emitted after a record is undone (passes DrawingAction)
    action_redone = Signal(object)    # Emitted after a record is redone (passes DrawingAction)

    # Entity lifecycle requests
    entity_create_requested = Signal(object)  # Entity must be re-inserted (passes entity)
    entity_delete_requested = Signal(str)     # Entity must be removed (passes entity_id)

    def __init__(self):
        super().__init__()

    def notify_history_changed(self, can_undo: bool, can_redo: bool,
                               undo_desc: str = None, redo_desc: str = None):
        """Notify that undo/redo availability has changed."""
        self.history_changed.emit(can_undo, can_redo,
                                  undo_desc or "", redo_desc or "")

    def notify_action_undone(self, action):
        self.action_undone.emit(action)

    def notify_action_redone(self, action):
        self.action_redone.emit(action)

    def create_entity(self, entity: Any) -> None:
        """Request that an entity be re-inserted into the drawing."""
        self.entity_create_requested.emit(entity)

    def delete_entity(self, entity_id: str) -> None:
        """Request that an entity be removed from the drawing."""
        self.entity_delete_requested.emit(entity_id)


# Global signal hub instance
_signal_hub_instance: Optional[SignalHub] = None


def get_signal_hub() -> SignalHub:
    """
    Get the global signal hub instance.
    Creates one if it doesn't exist.
    """
    global _signal_hub_instance
    if _signal_hub_instance is None:
        _signal_hub_instance = SignalHub()
    return _signal_hub_instance
