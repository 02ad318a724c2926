"""Video and course record DTOs."""

from typing import Any, Optional

from pydantic import Field

from signlink.application.dto.base import EntityRecord


class VideoRecord(EntityRecord):
    title: Optional[str] = None
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    duration: Optional[float] = None
    instructor: Optional[Any] = None
    category: Optional[str] = None
    difficulty: Optional[str] = None
    views: Optional[int] = Field(default=None, ge=0)
    likes: Optional[int] = Field(default=None, ge=0)


class CourseRecord(EntityRecord):
    title: Optional[str] = None
    description: Optional[str] = None
    instructor: Optional[Any] = None
    videos: Optional[list[Any]] = None
    enrolled_students: Optional[list[str]] = None
    category: Optional[str] = None
