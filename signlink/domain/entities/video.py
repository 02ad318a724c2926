"""
Video and Course Entities - Sign language tutorials and the courses that
group them.

A course owns its ordered video list but not the videos themselves: removing
a video from a course does not delete it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from signlink.domain.entities.base import BaseEntity, format_duration, serialize_ref
from signlink.domain.entities.user import User
from signlink.domain.exceptions import DomainValidationError
from signlink.domain.value_objects.difficulty import Difficulty


def check_title(value: Optional[str]) -> None:
    if not value or not value.strip():
        raise DomainValidationError("Title cannot be empty")


def check_difficulty(value: Optional[str]) -> Difficulty:
    if not Difficulty.is_valid(value):
        raise DomainValidationError(f"Invalid difficulty level: {value}")
    return Difficulty(value)


@dataclass(kw_only=True)
class Video(BaseEntity):
    title: str = ""
    description: str = ""
    thumbnail: str = ""
    duration: float = 0
    instructor: Optional[User] = None
    category: str = ""
    difficulty: str = Difficulty.BEGINNER.value
    views: int = 0
    likes: int = 0

    def update_title(self, title: str) -> None:
        check_title(title)
        self.title = title
        self.touch()

    def update_description(self, description: str) -> None:
        self.description = description or ""
        self.touch()

    def update_category(self, category: str) -> None:
        self.category = category or ""
        self.touch()

    def update_difficulty(self, difficulty: str) -> None:
        self.difficulty = check_difficulty(difficulty).value
        self.touch()

    def add_view(self) -> None:
        self.views += 1
        self.touch()

    def like(self) -> None:
        self.likes += 1
        self.touch()

    def unlike(self) -> None:
        if self.likes > 0:
            self.likes -= 1
            self.touch()

    def popularity_score(self) -> float:
        return self.views * 0.5 + self.likes * 2

    def difficulty_level(self) -> int:
        return Difficulty(self.difficulty).level

    def formatted_duration(self) -> str:
        return format_duration(self.duration)

    def validate(self) -> bool:
        return bool(
            self.title
            and self.title.strip()
            and self.category
            and self.category.strip()
            and self.duration > 0
            and Difficulty.is_valid(self.difficulty)
        )

    def serialize(self) -> dict[str, Any]:
        return {
            **self._base_record(),
            "title": self.title,
            "description": self.description,
            "thumbnail": self.thumbnail,
            "duration": self.duration,
            "formattedDuration": self.formatted_duration(),
            "instructor": serialize_ref(self.instructor),
            "category": self.category,
            "difficulty": self.difficulty,
            "views": self.views,
            "likes": self.likes,
            "popularityScore": self.popularity_score(),
        }


@dataclass(kw_only=True)
class Course(BaseEntity):
    title: str = ""
    description: str = ""
    instructor: Optional[User] = None
    videos: list[Video] = field(default_factory=list)
    enrolled_students: list[str] = field(default_factory=list)
    category: str = ""

    def add_video(self, video: Video) -> None:
        if not isinstance(video, Video):
            raise DomainValidationError("Must be a Video instance")
        self.videos.append(video)
        self.touch()

    def remove_video(self, video_id: str) -> bool:
        remaining = [video for video in self.videos if video.id != video_id]
        if len(remaining) == len(self.videos):
            return False
        self.videos = remaining
        self.touch()
        return True

    def enroll_student(self, student: User) -> bool:
        """Enroll a student; returns False when they were already enrolled."""
        if student.id in self.enrolled_students:
            return False
        self.enrolled_students.append(student.id)
        self.touch()
        return True

    def is_enrolled(self, student_id: str) -> bool:
        return student_id in self.enrolled_students

    def enrolled_count(self) -> int:
        return len(self.enrolled_students)

    def video_count(self) -> int:
        return len(self.videos)

    def total_duration(self) -> float:
        return sum(video.duration for video in self.videos)

    def formatted_total_duration(self) -> str:
        hours, remainder = divmod(int(self.total_duration()), 3600)
        return f"{hours}h {remainder // 60}m"

    def average_difficulty(self) -> float:
        if not self.videos:
            return 0
        return sum(video.difficulty_level() for video in self.videos) / len(
            self.videos
        )

    def validate(self) -> bool:
        return bool(
            self.title
            and self.title.strip()
            and self.instructor is not None
            and self.videos
            and all(isinstance(video, Video) for video in self.videos)
        )

    def serialize(self) -> dict[str, Any]:
        return {
            **self._base_record(),
            "title": self.title,
            "description": self.description,
            "instructor": serialize_ref(self.instructor),
            "videos": [video.serialize() for video in self.videos],
            "videoCount": self.video_count(),
            "totalDuration": self.total_duration(),
            "formattedTotalDuration": self.formatted_total_duration(),
            "enrolledStudents": list(self.enrolled_students),
            "enrolledCount": self.enrolled_count(),
            "category": self.category,
            "averageDifficulty": self.average_difficulty(),
        }
