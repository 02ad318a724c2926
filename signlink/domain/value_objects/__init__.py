"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass or enum member)
- Validates itself on creation
"""

from signlink.domain.value_objects.conversation_key import ConversationKey
from signlink.domain.value_objects.difficulty import Difficulty
from signlink.domain.value_objects.friendship_status import FriendshipStatus
from signlink.domain.value_objects.call_status import CallStatus

__all__ = [
    "ConversationKey",
    "Difficulty",
    "FriendshipStatus",
    "CallStatus",
]
