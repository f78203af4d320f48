"""
Tests for DrawingAction snapshots and state swapping.
"""

import threading
import pytest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from selective_undo.errors import SnapshotError
from selective_undo.core import (
    DrawingAction, CudOperation, ActionStatus, take_snapshot, apply_snapshot
)
from selective_undo.data import Shape, Vec2


class PlainEntity:
    """Entity that is not a dataclass."""

    def __init__(self, entity_id, **fields):
        self.entity_id = entity_id
        self.__dict__.update(fields)


def test_new_action_is_pending():
    shape = Shape()
    action = DrawingAction(shape)
    assert action.status is ActionStatus.PENDING
    assert action.operation is CudOperation.UPDATE
    assert action.later_state is None
    assert action.prior_state["entity_id"] == shape.entity_id


def test_capture_reports_change():
    """Test capture compares snapshots by value."""
    shape = Shape(position=Vec2(1, 1))
    action = DrawingAction(shape)
    assert action.capture(shape) is False
    assert action.status is ActionStatus.APPLIED

    action = DrawingAction(shape)
    shape.position.y = 7
    assert action.capture(shape) is True
    assert action.prior_state["position"] == Vec2(1, 1)
    assert action.later_state["position"] == Vec2(1, 7)


def test_snapshot_is_deep_copy():
    """Test that later edits never leak into stored snapshots."""
    shape = Shape(points=[Vec2(0, 0)], metadata={"tags": ["a"]})
    action = DrawingAction(shape)
    shape.points.append(Vec2(1, 1))
    action.capture(shape)

    shape.points[0].x = 99
    shape.metadata["tags"].append("b")

    assert action.prior_state["points"] == [Vec2(0, 0)]
    assert action.later_state["points"] == [Vec2(0, 0), Vec2(1, 1)]
    assert action.later_state["metadata"] == {"tags": ["a"]}


def test_undo_redo_swaps_state():
    shape = Shape(rotation=0.0)
    action = DrawingAction(shape)
    shape.rotation = 45.0
    action.capture(shape)

    action.undo()
    assert shape.rotation == 0.0
    assert action.status is ActionStatus.REVERTED

    action.redo()
    assert shape.rotation == 45.0
    assert action.status is ActionStatus.APPLIED


def test_undo_keeps_entity_identity():
    shape = Shape(points=[Vec2(0, 0)])
    points = shape.points
    action = DrawingAction(shape)
    shape.points = [Vec2(5, 5)]
    action.capture(shape)

    action.undo()
    assert shape.points == [Vec2(0, 0)]
    # Entity object is the same, only its fields are replaced
    assert action.entity is shape
    assert shape.points is not points


def test_repeated_toggle_is_stable():
    """Test undo/redo can toggle indefinitely without losing state."""
    shape = Shape(size=Vec2(1, 1))
    action = DrawingAction(shape)
    shape.size = Vec2(2, 2)
    action.capture(shape)

    for _ in range(5):
        action.undo()
        assert shape.size == Vec2(1, 1)
        action.redo()
        assert shape.size == Vec2(2, 2)


def test_restored_fields_do_not_alias_snapshot():
    shape = Shape(points=[Vec2(0, 0)])
    action = DrawingAction(shape)
    shape.points.append(Vec2(1, 1))
    action.capture(shape)

    action.undo()
    shape.points.append(Vec2(9, 9))
    action.redo()
    action.undo()
    assert shape.points == [Vec2(0, 0)]


def test_create_has_no_prior_state():
    shape = Shape(rotation=30.0)
    action = DrawingAction(shape, CudOperation.CREATE)
    assert action.prior_state is None
    assert action.capture(shape) is True

    action.undo()
    assert shape.rotation == 30.0
    assert action.status is ActionStatus.REVERTED


def test_delete_has_no_later_state():
    shape = Shape()
    action = DrawingAction(shape, CudOperation.DELETE)
    assert action.capture(shape) is True
    assert action.later_state is None
    assert action.prior_state["entity_id"] == shape.entity_id


def test_default_description():
    assert DrawingAction(Shape()).get_description() == "Update"
    assert DrawingAction(Shape(), CudOperation.DELETE, "Erase").get_description() == "Erase"


def test_plain_object_full_replacement():
    """Test attributes added after the snapshot are removed on restore."""
    entity = PlainEntity("p1", x=0)
    action = DrawingAction(entity)
    entity.x = 1
    entity.label = "new"
    action.capture(entity)

    action.undo()
    assert entity.x == 0
    assert not hasattr(entity, "label")

    action.redo()
    assert entity.x == 1
    assert entity.label == "new"


def test_apply_none_snapshot_is_noop():
    entity = PlainEntity("p1", x=3)
    apply_snapshot(entity, None)
    assert entity.x == 3


def test_snapshot_requires_entity_id():
    with pytest.raises(SnapshotError):
        take_snapshot(object())
    with pytest.raises(SnapshotError):
        DrawingAction(Vec2(), CudOperation.CREATE)


def test_snapshot_rejects_uncopyable_fields():
    entity = PlainEntity("p1", lock=threading.Lock())
    with pytest.raises(SnapshotError):
        DrawingAction(entity)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
