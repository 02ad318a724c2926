"""
Persistence Layer - Storage implementations.

Contains the in-memory repository used by every registry. A host application
backs the registries with a durable store by providing another
EntityRepository implementation.
"""

from signlink.infrastructure.persistence.in_memory_repository import (
    InMemoryRepository,
)

__all__ = [
    "InMemoryRepository",
]
