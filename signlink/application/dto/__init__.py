"""Inbound record DTOs for entity construction."""

from signlink.application.dto.base import RecordModel
from signlink.application.dto.user import AccessibilitySettingsRecord, UserRecord
from signlink.application.dto.post import PostRecord
from signlink.application.dto.message import MessageRecord
from signlink.application.dto.video import CourseRecord, VideoRecord
from signlink.application.dto.friendship import FriendshipRecord

__all__ = [
    "RecordModel",
    "AccessibilitySettingsRecord",
    "UserRecord",
    "PostRecord",
    "MessageRecord",
    "CourseRecord",
    "VideoRecord",
    "FriendshipRecord",
]
