"""
In-memory Entity Repository Implementation.

- Implements EntityRepository port from domain layer
- Keeps entities in a dict keyed by id (insertion ordered)
- Saving an existing id replaces the entity in place and keeps its position
- list_all() returns a new list, never a live view
"""

from typing import Optional

from signlink.domain.ports.repositories import EntityRepository
from signlink.domain.ports.repositories.entity_repository import E


class InMemoryRepository(EntityRepository[E]):
    def __init__(self):
        self._entities: dict[str, E] = {}

    def get_by_id(self, entity_id: str) -> Optional[E]:
        return self._entities.get(entity_id)

    def list_all(self) -> list[E]:
        return list(self._entities.values())

    def save(self, entity: E) -> None:
        self._entities[entity.id] = entity

    def delete(self, entity_id: str) -> bool:
        """Delete entity by ID. Returns True if deleted."""
        return self._entities.pop(entity_id, None) is not None

    def count(self) -> int:
        return len(self._entities)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities
