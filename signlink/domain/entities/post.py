"""
Post Entity - A feed post, optionally carrying a video.

Engagement score:
    likes * 1 + comments * 2 + shares * 3      (+ views * 0.5 for video posts)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Optional

from signlink.domain.entities.base import (
    BaseEntity,
    format_duration,
    serialize_ref,
    utc_now,
)
from signlink.domain.entities.user import User
from signlink.domain.exceptions import DomainValidationError

MAX_CONTENT_LENGTH = 500


class PostKind(str, Enum):
    REGULAR = "regular"
    VIDEO = "video"


@dataclass
class VideoMedia:
    video_url: str = ""
    thumbnail: str = ""
    duration: float = 0
    views: int = 0


def check_content(value: Optional[str]) -> None:
    if not value or not value.strip():
        raise DomainValidationError("Post content cannot be empty")
    if len(value) > MAX_CONTENT_LENGTH:
        raise DomainValidationError(
            f"Post content too long (max {MAX_CONTENT_LENGTH} characters)"
        )


@dataclass(kw_only=True)
class Post(BaseEntity):
    author: Optional[User] = None
    content: str = ""
    likes: int = 0
    comments: int = 0
    shares: int = 0
    is_public: bool = True
    kind: PostKind = PostKind.REGULAR
    media: Optional[VideoMedia] = None

    def __post_init__(self):
        super().__post_init__()
        self.kind = PostKind(self.kind)
        if self.kind is PostKind.VIDEO and self.media is None:
            self.media = VideoMedia()

    def update_content(self, content: str) -> None:
        check_content(content)
        self.content = content
        self.touch()

    def set_visibility(self, is_public: bool) -> None:
        self.is_public = bool(is_public)
        self.touch()

    def like(self) -> None:
        self.likes += 1
        self.touch()

    def unlike(self) -> None:
        if self.likes > 0:
            self.likes -= 1
            self.touch()

    def add_comment(self) -> None:
        self.comments += 1
        self.touch()

    def share(self) -> None:
        self.shares += 1
        self.touch()

    def add_view(self) -> None:
        media = self._require_media()
        media.views += 1
        self.touch()

    def engagement_score(self) -> float:
        base = self.likes * 1 + self.comments * 2 + self.shares * 3
        return base + _ENGAGEMENT_BONUS[self.kind](self)

    def formatted_time(self, now: Optional[datetime] = None) -> str:
        """Elapsed time since creation: ``12m ago``, ``3h ago`` or ``2d ago``."""
        elapsed = (now or utc_now()) - self.created_at
        minutes = max(int(elapsed.total_seconds() // 60), 0)
        if minutes < 60:
            return f"{minutes}m ago"
        hours = minutes // 60
        if hours < 24:
            return f"{hours}h ago"
        return f"{hours // 24}d ago"

    def formatted_duration(self) -> str:
        return format_duration(self._require_media().duration)

    def is_authored_by(self, user_id: str) -> bool:
        return self.author is not None and self.author.id == user_id

    def validate(self) -> bool:
        if self.author is None:
            return False
        try:
            check_content(self.content)
        except DomainValidationError:
            return False
        return _VARIANT_CHECKS[self.kind](self)

    def serialize(self) -> dict[str, Any]:
        record = {
            **self._base_record(),
            "kind": self.kind.value,
            "author": serialize_ref(self.author),
            "content": self.content,
            "likes": self.likes,
            "comments": self.comments,
            "shares": self.shares,
            "isPublic": self.is_public,
            "engagementScore": self.engagement_score(),
            "time": self.formatted_time(),
        }
        record.update(_VARIANT_SERIALIZERS[self.kind](self))
        return record

    def _require_media(self) -> VideoMedia:
        if self.media is None:
            raise DomainValidationError(f"Post {self.id} has no video")
        return self.media


def _video_record(post: Post) -> dict[str, Any]:
    return {
        "videoUrl": post.media.video_url,
        "thumbnail": post.media.thumbnail,
        "duration": post.media.duration,
        "formattedDuration": format_duration(post.media.duration),
        "views": post.media.views,
    }


_ENGAGEMENT_BONUS: dict[PostKind, Callable[[Post], float]] = {
    PostKind.REGULAR: lambda post: 0,
    PostKind.VIDEO: lambda post: post.media.views * 0.5,
}

_VARIANT_CHECKS: dict[PostKind, Callable[[Post], bool]] = {
    PostKind.REGULAR: lambda post: True,
    PostKind.VIDEO: lambda post: bool(
        post.media is not None and post.media.video_url.strip()
    ),
}

_VARIANT_SERIALIZERS: dict[PostKind, Callable[[Post], dict[str, Any]]] = {
    PostKind.REGULAR: lambda post: {},
    PostKind.VIDEO: _video_record,
}
