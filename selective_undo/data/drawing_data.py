"""
Data models for drawings.

This module defines the entity types the history system is exercised with:
- Vec2: 2D vector for positions, sizes and path points
- Style: Stroke and fill settings
- Shape: A drawable entity with a stable id
- Drawing: Ordered collection of shapes; re-inserts and removes shapes on
  behalf of undo/redo
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional
import logging
import uuid


logger = logging.getLogger(__name__)


@dataclass
class Vec2:
    """2D vector for positions and sizes."""
    x: float = 0.0
    y: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> 'Vec2':
        """Create from dictionary."""
        return cls(x=data.get("x", 0.0), y=data.get("y", 0.0))


@dataclass
class Style:
    """Stroke and fill of a shape. Colors are CSS color strings."""
    stroke: str = "#000000"
    fill: str = "none"
    stroke_width: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stroke": self.stroke,
            "fill": self.fill,
            "stroke_width": self.stroke_width
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Style':
        return cls(
            stroke=data.get("stroke", "#000000"),
            fill=data.get("fill", "none"),
            stroke_width=data.get("stroke_width", 1.0)
        )


@dataclass
class Shape:
    """
    A drawable entity.

    Attributes:
        entity_id: Stable unique identifier
        kind: Shape type ("rect", "ellipse", "path", "text", ...)
        position: Top-left corner in drawing units
        size: Bounding box size
        rotation: Rotation in degrees
        points: Path vertices, relative to position
        style: Stroke and fill
        z_order: Draw order (higher = drawn on top)
        visible: Whether the shape is rendered
        metadata: Extensible host data
    """
    entity_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    kind: str = "rect"
    position: Vec2 = field(default_factory=Vec2)
    size: Vec2 = field(default_factory=lambda: Vec2(10.0, 10.0))
    rotation: float = 0.0
    points: List[Vec2] = field(default_factory=list)
    style: Style = field(default_factory=Style)
    z_order: int = 0
    visible: bool = True
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "entity_id": self.entity_id,
            "kind": self.kind,
            "position": self.position.to_dict(),
            "size": self.size.to_dict(),
            "rotation": self.rotation,
            "points": [p.to_dict() for p in self.points],
            "style": self.style.to_dict(),
            "z_order": self.z_order,
            "visible": self.visible,
            "metadata": self.metadata
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Shape':
        """Create from dictionary."""
        return cls(
            entity_id=data.get("entity_id", str(uuid.uuid4())),
            kind=data.get("kind", "rect"),
            position=Vec2.from_dict(data.get("position", {})),
            size=Vec2.from_dict(data.get("size", {"x": 10.0, "y": 10.0})),
            rotation=data.get("rotation", 0.0),
            points=[Vec2.from_dict(p) for p in data.get("points", [])],
            style=Style.from_dict(data.get("style", {})),
            z_order=data.get("z_order", 0),
            visible=data.get("visible", True),
            metadata=data.get("metadata", {})
        )

    def translate(self, dx: float, dy: float) -> None:
        """Move the shape in place."""
        self.position.x += dx
        self.position.y += dy


class Drawing:
    """
    Ordered collection of shapes keyed by entity id.

    Implements EntityHost, so it can be passed straight to HistoryManager.
    """

    def __init__(self, shapes: Optional[List[Shape]] = None):
        self._shapes: Dict[str, Shape] = {}
        for shape in shapes or []:
            self.add(shape)

    def add(self, shape: Shape) -> None:
        """Add a shape. An existing shape with the same id is replaced."""
        self._shapes[shape.entity_id] = shape

    def remove(self, entity_id: str) -> Optional[Shape]:
        """Remove a shape by id. Returns the removed shape, or None."""
        return self._shapes.pop(entity_id, None)

    def get(self, entity_id: str) -> Optional[Shape]:
        return self._shapes.get(entity_id)

    def ids(self) -> List[str]:
        return list(self._shapes)

    def get_sorted_shapes(self) -> List[Shape]:
        """Get shapes sorted by z_order (for rendering)."""
        return sorted(self._shapes.values(), key=lambda s: s.z_order)

    # EntityHost

    def create_entity(self, entity: Shape) -> None:
        if entity.entity_id in self._shapes:
            logger.debug("Shape %s already in drawing", entity.entity_id)
        self.add(entity)

    def delete_entity(self, entity_id: str) -> None:
        if self.remove(entity_id) is None:
            logger.debug("Shape %s not in drawing", entity_id)

    def __len__(self) -> int:
        return len(self._shapes)

    def __contains__(self, entity_id: str) -> bool:
        return entity_id in self._shapes

    def __iter__(self) -> Iterator[Shape]:
        return iter(list(self._shapes.values()))
