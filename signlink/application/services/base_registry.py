"""
Shared registry plumbing: validated registration, lookup and top-N ranking.
"""

import logging
from typing import Callable, Generic, Optional

from signlink.config.settings import Config
from signlink.domain.exceptions import DomainValidationError, EntityNotFoundError
from signlink.domain.ports.repositories import EntityRepository
from signlink.domain.ports.repositories.entity_repository import E

logger = logging.getLogger(__name__)


def top_ranked(
    entities: list[E], score: Callable[[E], float], limit: Optional[int] = None
) -> list[E]:
    """Sort by score descending, keep insertion order on ties, truncate to limit."""
    if limit is None:
        limit = Config.TOP_RESULTS_LIMIT
    if limit < 0:
        raise DomainValidationError("Limit cannot be negative")
    return sorted(entities, key=score, reverse=True)[:limit]


class EntityRegistry(Generic[E]):
    """Owns one identity-keyed collection of entities."""

    entity_label = "Entity"

    def __init__(self, repository: EntityRepository[E]):
        self._repository = repository

    def _register(self, entity: E) -> E:
        if not entity.validate():
            logger.warning("Rejected invalid %s data", self.entity_label.lower())
            raise DomainValidationError(f"Invalid {self.entity_label.lower()} data")
        if self._repository.get_by_id(entity.id) is not None:
            raise DomainValidationError(
                f"{self.entity_label} {entity.id} already exists"
            )
        self._repository.save(entity)
        logger.info("Registered %s %s", self.entity_label.lower(), entity.id)
        return entity

    def _find(self, entity_id: str) -> Optional[E]:
        return self._repository.get_by_id(entity_id)

    def _require(self, entity_id: str) -> E:
        entity = self._repository.get_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(self.entity_label, entity_id)
        return entity

    def _snapshot(self) -> list[E]:
        return self._repository.list_all()

    def _delete(self, entity_id: str) -> bool:
        deleted = self._repository.delete(entity_id)
        if deleted:
            logger.info("Deleted %s %s", self.entity_label.lower(), entity_id)
        return deleted
