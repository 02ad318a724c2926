"""
REPOSITORY PORTS - Entity storage interfaces

Infrastructure layer provides implementations.
"""

from signlink.domain.ports.repositories.entity_repository import EntityRepository

__all__ = [
    "EntityRepository",
]
