"""
ConversationKey Value Object - Order-independent identity of a two-party thread.

    ConversationKey.between("u2", "u1") == ConversationKey.between("u1", "u2")
    str(ConversationKey.between("u2", "u1")) == "u1-u2"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class ConversationKey:
    first: str
    second: str

    SEPARATOR: ClassVar[str] = "-"

    def __post_init__(self):
        if not self.first or not self.second:
            raise ValueError("Conversation participants cannot be empty")
        if self.first > self.second:
            raise ValueError(
                f"Participants must be in canonical order: {self.first!r} > {self.second!r}"
            )

    @classmethod
    def between(cls, user_id_a: str, user_id_b: str) -> ConversationKey:
        """Build the canonical key for two participant ids, in either order."""
        first, second = sorted((str(user_id_a), str(user_id_b)))
        return cls(first=first, second=second)

    @property
    def participants(self) -> tuple[str, str]:
        return (self.first, self.second)

    def involves(self, user_id: str) -> bool:
        return user_id in self.participants

    def __str__(self) -> str:
        return f"{self.first}{self.SEPARATOR}{self.second}"
