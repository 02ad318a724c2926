"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier and created/updated timestamps
- Has behavior (methods) that keeps its own invariants
- Implements validate() and serialize()
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from signlink.domain.entities.base import BaseEntity
from signlink.domain.entities.user import (
    AccessibilityProfile,
    AccessibilitySettings,
    InstructorProfile,
    User,
    UserKind,
)
from signlink.domain.entities.post import Post, PostKind, VideoMedia
from signlink.domain.entities.message import CallDetails, Message, MessageKind
from signlink.domain.entities.video import Course, Video
from signlink.domain.entities.friendship import Friendship

__all__ = [
    "BaseEntity",
    "AccessibilityProfile",
    "AccessibilitySettings",
    "InstructorProfile",
    "User",
    "UserKind",
    "Post",
    "PostKind",
    "VideoMedia",
    "CallDetails",
    "Message",
    "MessageKind",
    "Course",
    "Video",
    "Friendship",
]
