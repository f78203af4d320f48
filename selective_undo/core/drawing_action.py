"""
Snapshot-based action record for a single drawing entity.

Stores the complete field state of one entity before and after a change.
Undo and redo are the same operation: write the stored state back onto the
live entity, then swap the two snapshots.
"""

import copy
import dataclasses
from enum import Enum
from typing import Any, Dict, Optional

from selective_undo.errors import SnapshotError


Snapshot = Dict[str, Any]


class CudOperation(Enum):
    """Kind of modification an action tracks."""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class ActionStatus(Enum):
    """Lifecycle of an action record."""
    PENDING = "pending"    # before state captured, waiting for capture()
    APPLIED = "applied"    # entity currently holds the "after" state
    REVERTED = "reverted"  # entity currently holds the "before" state


def _field_names(entity: Any):
    if dataclasses.is_dataclass(entity) and not isinstance(entity, type):
        return [f.name for f in dataclasses.fields(entity)]
    try:
        return list(vars(entity))
    except TypeError as e:
        raise SnapshotError(
            f"{type(entity).__name__} has no instance fields to snapshot"
        ) from e


def take_snapshot(entity: Any) -> Snapshot:
    """
    Deep copy every field of an entity into a plain dictionary.

    Args:
        entity: Object exposing an ``entity_id`` attribute

    Returns:
        Mapping of field name to an independent copy of its value

    Raises:
        SnapshotError: If the entity has no id or a field cannot be copied
    """
    if not hasattr(entity, "entity_id"):
        raise SnapshotError(f"{type(entity).__name__} has no entity_id")

    values = {name: getattr(entity, name) for name in _field_names(entity)}
    try:
        return copy.deepcopy(values)
    except (TypeError, copy.Error, RecursionError) as e:
        raise SnapshotError(
            f"Cannot snapshot entity {entity.entity_id!r}: {e}"
        ) from e


def apply_snapshot(entity: Any, snapshot: Optional[Snapshot]) -> None:
    """Replace all fields of ``entity`` with copies from ``snapshot``.

    A ``None`` snapshot means the entity does not exist in that state, so
    its fields are left alone.
    """
    if snapshot is None:
        return

    if not dataclasses.is_dataclass(entity):
        # Plain objects: drop attributes added after the snapshot was taken
        for name in list(vars(entity)):
            if name not in snapshot:
                delattr(entity, name)

    for name, value in snapshot.items():
        setattr(entity, name, copy.deepcopy(value))


class DrawingAction:
    """One entity's state transition with before/after snapshots."""

    def __init__(self, entity: Any, operation: CudOperation = CudOperation.UPDATE,
                 description: Optional[str] = None):
        """
        Create the action and capture the "before" state.

        Args:
            entity: The live entity to track (kept by reference)
            operation: Kind of modification being tracked
            description: Human-readable description of the change
        """
        self.entity = entity
        self.operation = operation
        self.description = description or operation.value.capitalize()
        # A created entity has no prior state
        if operation is CudOperation.CREATE:
            if not hasattr(entity, "entity_id"):
                raise SnapshotError(f"{type(entity).__name__} has no entity_id")
            self.prior_state: Optional[Snapshot] = None
        else:
            self.prior_state = take_snapshot(entity)
        self.later_state: Optional[Snapshot] = None
        self.status = ActionStatus.PENDING

    @property
    def entity_id(self) -> str:
        return self.entity.entity_id

    def capture(self, entity: Any) -> bool:
        """
        Capture the "after" state. Call this once the change is made.

        Returns:
            True if the entity differs from its "before" state
        """
        if self.operation is CudOperation.DELETE:
            self.later_state = None
        else:
            self.later_state = take_snapshot(entity)
        self.status = ActionStatus.APPLIED
        return self.prior_state != self.later_state

    def undo(self):
        """Restore the "before" state."""
        self._swap_state(ActionStatus.REVERTED)

    def redo(self):
        """Restore the "after" state."""
        self._swap_state(ActionStatus.APPLIED)

    def _swap_state(self, status: ActionStatus):
        apply_snapshot(self.entity, self.prior_state)
        self.prior_state, self.later_state = self.later_state, self.prior_state
        self.status = status

    def get_description(self) -> str:
        return self.description

    def __repr__(self):
        return (f"DrawingAction({self.operation.value}, id={self.entity_id!r}, "
                f"status={self.status.value})")
