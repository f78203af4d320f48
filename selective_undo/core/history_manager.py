"""
History Manager for selective undo/redo of drawing entities.

Keeps a bounded, chronological log of DrawingAction records. Undo and redo
can be restricted to a set of entity ids, so each entity walks its own
history independently of the others.
"""

import logging
from collections import deque
from contextlib import contextmanager
from typing import Any, Deque, Dict, Iterable, List, Optional, Tuple

from selective_undo.common.history_config import HistoryConfig, DEFAULT_MAX_ACTIONS
from .drawing_action import ActionStatus, CudOperation, DrawingAction
from .entity_host import EntityHost


logger = logging.getLogger(__name__)


class HistoryManager:
    """Manages selective undo/redo over a bounded log of entity actions."""

    def __init__(self, max_actions: int = DEFAULT_MAX_ACTIONS,
                 host: Optional[EntityHost] = None, signal_hub=None):
        """
        Initialize the history manager.

        Args:
            max_actions: Maximum number of actions to keep in history (>= 1)
            host: Receives create/delete requests when undo/redo has to
                re-insert or remove an entity
            signal_hub: Signal hub for notifications

        Raises:
            ValueError: If max_actions is not a positive integer
        """
        if isinstance(max_actions, bool) or not isinstance(max_actions, int) or max_actions < 1:
            raise ValueError(f"max_actions must be a positive integer, got {max_actions!r}")

        self._max_actions = max_actions
        self._host = host
        self._signal_hub = signal_hub
        self._actions: Deque[DrawingAction] = deque(maxlen=max_actions)
        self._pending: Dict[str, DrawingAction] = {}  # entity_id -> staged update
        self._replaying = False

    @classmethod
    def from_config(cls, config: HistoryConfig, host: Optional[EntityHost] = None,
                    signal_hub=None) -> 'HistoryManager':
        """Create a manager from loaded settings and apply its log level."""
        config.apply_log_level()
        return cls(config.max_actions, host=host, signal_hub=signal_hub)

    @property
    def max_actions(self) -> int:
        return self._max_actions

    @property
    def actions(self) -> Tuple[DrawingAction, ...]:
        """Committed actions, oldest first."""
        return tuple(self._actions)

    # ─────────────────────────────────────────────────────────────
    # TRANSACTION API
    # ─────────────────────────────────────────────────────────────

    def begin(self, entities: Iterable[Any], operation: CudOperation = CudOperation.UPDATE,
              description: Optional[str] = None):
        """
        Begin tracking a change. Call before modifying the entities.

        Creations and deletions have no editing phase, so they are recorded
        immediately. Updates are staged until commit() or abort().

        Args:
            entities: Entities about to change
            operation: Kind of change
            description: Human-readable description for the undo menu
        """
        appended = False
        for entity in entities:
            action = DrawingAction(entity, operation, description)
            if operation is not CudOperation.UPDATE:
                action.capture(entity)
                self._append(action)
                appended = True
            else:
                if entity.entity_id in self._pending:
                    logger.debug("Replacing staged edit for %s", entity.entity_id)
                self._pending[entity.entity_id] = action

        if appended:
            self._update_history_state()

    def commit(self, entities: Iterable[Any]) -> int:
        """
        End tracking and save the changes. Call after modifications complete.

        Entities without a staged edit are skipped. Edits that left the
        entity unchanged are discarded. Staging is cleared in every case.

        Returns:
            Number of actions added to history
        """
        added = 0
        try:
            for entity in entities:
                action = self._pending.pop(entity.entity_id, None)
                if action is None:
                    continue
                if action.capture(entity):
                    self._append(action)
                    added += 1
                else:
                    logger.debug("No change on %s, edit discarded", entity.entity_id)
        finally:
            self._pending.clear()

        if added:
            self._update_history_state()
        return added

    def abort(self):
        """Cancel pending edits without saving them.

        Note:
            Only the tracking is cancelled. Changes already made to the
            entities are kept.
        """
        self._pending.clear()

    def reset(self):
        """Clear all history, e.g. when a new drawing is loaded."""
        self._pending.clear()
        self._actions.clear()
        logger.debug("History reset")
        self._update_history_state()

    # ─────────────────────────────────────────────────────────────
    # UNDO/REDO API
    # ─────────────────────────────────────────────────────────────

    def undo_last(self, ids: Optional[Iterable[str]] = None) -> Optional[DrawingAction]:
        """
        Undo the most recent applied action.

        Args:
            ids: Restrict to actions on these entity ids (all if None or empty)

        Returns:
            The undone action, or None if nothing matched
        """
        undoable = self._filter(ActionStatus.APPLIED, ids)
        if not undoable:
            return None
        action = undoable[-1]

        with self._replay_guard():
            if action.operation is CudOperation.CREATE:
                self._request_delete(action)
            elif action.operation is CudOperation.DELETE:
                self._request_create(action)
            action.undo()

        logger.debug("Undid %r", action)
        if self._signal_hub is not None:
            self._signal_hub.notify_action_undone(action)
        self._update_history_state()
        return action

    def redo_last(self, ids: Optional[Iterable[str]] = None) -> Optional[DrawingAction]:
        """
        Redo the earliest reverted action.

        Undo walks backward, redo walks forward, so redo starts from the
        oldest reverted action.

        Args:
            ids: Restrict to actions on these entity ids (all if None or empty)

        Returns:
            The redone action, or None if nothing matched
        """
        redoable = self._filter(ActionStatus.REVERTED, ids)
        if not redoable:
            return None
        action = redoable[0]

        with self._replay_guard():
            if action.operation is CudOperation.CREATE:
                self._request_create(action)
            elif action.operation is CudOperation.DELETE:
                self._request_delete(action)
            action.redo()

        logger.debug("Redid %r", action)
        if self._signal_hub is not None:
            self._signal_hub.notify_action_redone(action)
        self._update_history_state()
        return action

    def can_undo(self, ids: Optional[Iterable[str]] = None) -> bool:
        """Check if undo is available."""
        return bool(self._filter(ActionStatus.APPLIED, ids))

    def can_redo(self, ids: Optional[Iterable[str]] = None) -> bool:
        """Check if redo is available."""
        return bool(self._filter(ActionStatus.REVERTED, ids))

    def get_undo_description(self, ids: Optional[Iterable[str]] = None) -> Optional[str]:
        """Get description of the action that would be undone."""
        undoable = self._filter(ActionStatus.APPLIED, ids)
        return undoable[-1].get_description() if undoable else None

    def get_redo_description(self, ids: Optional[Iterable[str]] = None) -> Optional[str]:
        """Get description of the action that would be redone."""
        redoable = self._filter(ActionStatus.REVERTED, ids)
        return redoable[0].get_description() if redoable else None

    # ─────────────────────────────────────────────────────────────
    # DIAGNOSTICS
    # ─────────────────────────────────────────────────────────────

    def get_history_size(self) -> int:
        """Get the current number of actions in history."""
        return len(self._actions)

    def has_pending(self) -> bool:
        return bool(self._pending)

    def get_history_info(self) -> dict:
        """Get diagnostic information about history state."""
        return {
            'actions': len(self._actions),
            'undoable': len(self._filter(ActionStatus.APPLIED)),
            'redoable': len(self._filter(ActionStatus.REVERTED)),
            'pending_ids': sorted(self._pending),
            'max_actions': self._max_actions,
        }

    # ─────────────────────────────────────────────────────────────
    # INTERNALS
    # ─────────────────────────────────────────────────────────────

    def _append(self, action: DrawingAction):
        if len(self._actions) == self._max_actions:
            logger.debug("History full, dropping %r", self._actions[0])
        # deque(maxlen) drops the oldest action on overflow
        self._actions.append(action)

    def _filter(self, status: ActionStatus,
                ids: Optional[Iterable[str]] = None) -> List[DrawingAction]:
        if isinstance(ids, str):
            ids = [ids]
        wanted = set(ids) if ids else None
        return [
            a for a in self._actions
            if a.status is status and (not wanted or a.entity_id in wanted)
        ]

    def _request_create(self, action: DrawingAction):
        if self._host is not None:
            self._host.create_entity(action.entity)

    def _request_delete(self, action: DrawingAction):
        if self._host is not None:
            self._host.delete_entity(action.entity_id)

    @contextmanager
    def _replay_guard(self):
        if self._replaying:
            raise RuntimeError("undo/redo called from inside an entity host callback")
        self._replaying = True
        try:
            yield
        finally:
            self._replaying = False

    def _update_history_state(self):
        """Notify signal hub of undo/redo availability."""
        if self._signal_hub is not None:
            self._signal_hub.notify_history_changed(
                self.can_undo(),
                self.can_redo(),
                self.get_undo_description(),
                self.get_redo_description()
            )
