"""
Friendship Entity - A connection request between two users.

``user1`` sent the request, ``user2`` received it. ``accept()``,
``decline()`` and ``unblock()`` report a refused transition by returning
False; they never raise for an expected wrong-state call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from signlink.domain.entities.base import BaseEntity, serialize_ref
from signlink.domain.entities.user import User
from signlink.domain.exceptions import DomainValidationError
from signlink.domain.value_objects.friendship_status import FriendshipStatus


@dataclass(kw_only=True)
class Friendship(BaseEntity):
    user1: Optional[User] = None
    user2: Optional[User] = None
    status: FriendshipStatus = FriendshipStatus.PENDING
    mutual_friends: int = 0

    def __post_init__(self):
        super().__post_init__()
        self.status = FriendshipStatus(self.status)

    def accept(self) -> bool:
        return self._transition(FriendshipStatus.PENDING, FriendshipStatus.ACCEPTED)

    def decline(self) -> bool:
        return self._transition(FriendshipStatus.PENDING, FriendshipStatus.DECLINED)

    def block(self) -> None:
        self.status = FriendshipStatus.BLOCKED
        self.touch()

    def unblock(self) -> bool:
        return self._transition(FriendshipStatus.BLOCKED, FriendshipStatus.ACCEPTED)

    def is_pending(self) -> bool:
        return self.status is FriendshipStatus.PENDING

    def is_accepted(self) -> bool:
        return self.status is FriendshipStatus.ACCEPTED

    def is_blocked(self) -> bool:
        return self.status is FriendshipStatus.BLOCKED

    def involves(self, user_id: str) -> bool:
        return any(
            user is not None and user.id == user_id for user in (self.user1, self.user2)
        )

    def other_participant(self, user_id: str) -> Optional[User]:
        if self.user1 is not None and self.user1.id == user_id:
            return self.user2
        if self.user2 is not None and self.user2.id == user_id:
            return self.user1
        return None

    def is_friend_with(self, user: User) -> bool:
        return self.is_accepted() and self.involves(user.id)

    def set_mutual_friends(self, count: int) -> None:
        if count < 0:
            raise DomainValidationError("Mutual friend count cannot be negative")
        self.mutual_friends = int(count)
        self.touch()

    def validate(self) -> bool:
        return (
            self.user1 is not None
            and self.user2 is not None
            and self.user1.id != self.user2.id
        )

    def serialize(self) -> dict[str, Any]:
        return {
            **self._base_record(),
            "user1": serialize_ref(self.user1),
            "user2": serialize_ref(self.user2),
            "status": self.status.value,
            "mutualFriends": self.mutual_friends,
        }

    def _transition(self, source: FriendshipStatus, target: FriendshipStatus) -> bool:
        if self.status is not source:
            return False
        self.status = target
        self.touch()
        return True
