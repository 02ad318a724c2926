"""
Entity Repository Port - Interface for an identity-keyed entity collection.
Implementation: signlink/infrastructure/persistence/in_memory_repository.py
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from signlink.domain.entities.base import BaseEntity

E = TypeVar("E", bound=BaseEntity)


class EntityRepository(ABC, Generic[E]):
    @abstractmethod
    def get_by_id(self, entity_id: str) -> Optional[E]: ...

    @abstractmethod
    def list_all(self) -> list[E]:
        """Snapshot of the stored entities in insertion order."""

    @abstractmethod
    def save(self, entity: E) -> None: ...

    @abstractmethod
    def delete(self, entity_id: str) -> bool: ...

    @abstractmethod
    def count(self) -> int: ...
