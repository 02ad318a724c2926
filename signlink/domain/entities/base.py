"""
BaseEntity - Identity, timestamps and the validate/serialize contract.

Concrete entities must override both ``validate()`` and ``serialize()``;
otherwise they cannot be instantiated (ABC raises TypeError).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4


def generate_id() -> str:
    return str(uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def format_duration(seconds: float) -> str:
    """Render seconds as ``m:ss``."""
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}:{secs:02d}"


@dataclass(kw_only=True)
class BaseEntity(ABC):
    id: str = field(default_factory=generate_id)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        # naive timestamps are taken as UTC
        self.created_at = as_utc(self.created_at)
        if self.updated_at is None:
            self.updated_at = self.created_at
        else:
            self.updated_at = as_utc(self.updated_at)

    def touch(self) -> None:
        self.updated_at = utc_now()

    @abstractmethod
    def validate(self) -> bool:
        """Return True when the current state satisfies the entity invariants."""

    @abstractmethod
    def serialize(self) -> dict[str, Any]:
        """Return a plain-record snapshot, computed fields included."""

    def _base_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }


def serialize_ref(entity: Optional[BaseEntity]) -> Optional[dict[str, Any]]:
    return entity.serialize() if entity is not None else None
