"""Post record DTO."""

from typing import Any, Optional

from pydantic import Field

from signlink.application.dto.base import EntityRecord


class PostRecord(EntityRecord):
    kind: Optional[str] = None
    author: Optional[Any] = None
    content: Optional[str] = None
    likes: Optional[int] = Field(default=None, ge=0)
    comments: Optional[int] = Field(default=None, ge=0)
    shares: Optional[int] = Field(default=None, ge=0)
    is_public: Optional[bool] = None

    # Video posts
    video_url: Optional[str] = None
    thumbnail: Optional[str] = None
    duration: Optional[float] = Field(default=None, ge=0)
    views: Optional[int] = Field(default=None, ge=0)
