"""Friendship record DTO."""

from typing import Any, Optional

from pydantic import Field

from signlink.application.dto.base import EntityRecord
from signlink.domain.value_objects.friendship_status import FriendshipStatus


class FriendshipRecord(EntityRecord):
    user1: Optional[Any] = None
    user2: Optional[Any] = None
    status: Optional[FriendshipStatus] = None
    mutual_friends: Optional[int] = Field(default=None, ge=0)
