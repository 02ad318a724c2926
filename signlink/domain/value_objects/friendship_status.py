"""
FriendshipStatus Value Object - States of the friendship state machine.

    pending  -> accepted | declined | blocked
    accepted -> blocked
    blocked  -> accepted   (unblock)
    declined -> blocked
"""

from enum import Enum


class FriendshipStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    BLOCKED = "blocked"
