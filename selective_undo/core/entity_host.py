"""
Host capability used by the history manager.

Undoing a creation or a deletion has to physically remove or re-insert the
entity in the host's drawing. The history manager does not own the drawing,
so it asks the host through this interface.
"""

from typing import Any, Callable, Optional, Protocol


class EntityHost(Protocol):
    """Anything that can add or remove entities from a drawing."""

    def create_entity(self, entity: Any) -> None:
        """Make ``entity`` exist again, keyed by its ``entity_id``."""
        ...

    def delete_entity(self, entity_id: str) -> None:
        """Remove the entity with ``entity_id``."""
        ...


class CallbackHost:
    """EntityHost built from two plain callables. Missing callables are no-ops."""

    def __init__(self, on_create: Optional[Callable[[Any], None]] = None,
                 on_delete: Optional[Callable[[str], None]] = None):
        self._on_create = on_create
        self._on_delete = on_delete

    def create_entity(self, entity: Any) -> None:
        if self._on_create:
            self._on_create(entity)

    def delete_entity(self, entity_id: str) -> None:
        if self._on_delete:
            self._on_delete(entity_id)
