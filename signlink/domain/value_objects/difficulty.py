"""
Difficulty Value Object - Tier of an instructional video.
"""

from enum import Enum


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def level(self) -> int:
        """Ordinal used for averaging (1/2/3)."""
        return _LEVELS[self]

    @classmethod
    def is_valid(cls, value) -> bool:
        return any(value == member.value for member in cls)


_LEVELS = {
    Difficulty.BEGINNER: 1,
    Difficulty.INTERMEDIATE: 2,
    Difficulty.ADVANCED: 3,
}
