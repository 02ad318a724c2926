"""
Video registry - instructional videos and the courses that group them.

Videos and courses live in separate collections; a course holds references
to registered videos, and a video may belong to no course at all.
"""

from typing import Any, Mapping, Optional

from signlink.application.mappers import build_course, build_video
from signlink.application.services.base_registry import EntityRegistry, top_ranked
from signlink.domain.entities.user import User
from signlink.domain.entities.video import Course, Video
from signlink.domain.exceptions import DomainValidationError
from signlink.domain.ports.repositories import EntityRepository


class CourseRegistry(EntityRegistry[Course]):
    """Course collection owned by a VideoRegistry."""

    entity_label = "Course"

    def create_course(self, record: Mapping[str, Any]) -> Course:
        course = build_course(record)
        if not all(video.validate() for video in course.videos):
            raise DomainValidationError(
                "Invalid course data: contains an invalid video"
            )
        return self._register(course)

    def find_course(self, course_id: str) -> Optional[Course]:
        return self._find(course_id)

    def get_course(self, course_id: str) -> Course:
        return self._require(course_id)

    def list_courses(self) -> list[Course]:
        return self._snapshot()

    def courses_for_student(self, student_id: str) -> list[Course]:
        return [
            course for course in self._snapshot() if course.is_enrolled(student_id)
        ]


class VideoRegistry(EntityRegistry[Video]):
    entity_label = "Video"

    def __init__(
        self,
        repository: EntityRepository[Video],
        course_repository: EntityRepository[Course],
    ):
        super().__init__(repository)
        self._courses = CourseRegistry(course_repository)

    # ==================== Videos ====================

    def create_video(self, record: Mapping[str, Any]) -> Video:
        """
        Build, validate and register a video.

        Raises:
            DomainValidationError: missing title or category, non-positive
                duration or unknown difficulty
        """
        return self._register(build_video(record))

    def find_video(self, video_id: str) -> Optional[Video]:
        return self._find(video_id)

    def get_video(self, video_id: str) -> Video:
        return self._require(video_id)

    def list_videos(self) -> list[Video]:
        return self._snapshot()

    def videos_by_category(self, category: str) -> list[Video]:
        return [video for video in self._snapshot() if video.category == category]

    def videos_by_difficulty(self, difficulty: str) -> list[Video]:
        return [video for video in self._snapshot() if video.difficulty == difficulty]

    def videos_by_instructor(self, instructor_id: str) -> list[Video]:
        return [
            video
            for video in self._snapshot()
            if video.instructor is not None and video.instructor.id == instructor_id
        ]

    def add_view(self, video_id: str) -> Video:
        video = self._require(video_id)
        video.add_view()
        return video

    def like_video(self, video_id: str) -> Video:
        video = self._require(video_id)
        video.like()
        return video

    def unlike_video(self, video_id: str) -> Video:
        video = self._require(video_id)
        video.unlike()
        return video

    def popular_videos(self, limit: Optional[int] = None) -> list[Video]:
        """Highest popularity first; equal scores keep insertion order."""
        return top_ranked(self._snapshot(), Video.popularity_score, limit)

    # ==================== Courses ====================

    def create_course(self, record: Mapping[str, Any]) -> Course:
        """
        Build, validate and register a course.

        Videos in the record may be Video objects or video records. Records
        are built into Video entities but are not added to the video
        collection.

        Raises:
            DomainValidationError: missing title or instructor, no videos, or
                a video entry that is neither a Video nor a record
        """
        return self._courses.create_course(record)

    def find_course(self, course_id: str) -> Optional[Course]:
        return self._courses.find_course(course_id)

    def get_course(self, course_id: str) -> Course:
        return self._courses.get_course(course_id)

    def list_courses(self) -> list[Course]:
        return self._courses.list_courses()

    def add_video_to_course(self, course_id: str, video_id: str) -> Course:
        course = self._courses.get_course(course_id)
        video = self._require(video_id)
        course.add_video(video)
        return course

    def remove_video_from_course(self, course_id: str, video_id: str) -> Course:
        course = self._courses.get_course(course_id)
        course.remove_video(video_id)
        return course

    def enroll_student(self, course_id: str, student: User) -> Course:
        course = self._courses.get_course(course_id)
        course.enroll_student(student)
        return course

    def courses_for_student(self, student_id: str) -> list[Course]:
        return self._courses.courses_for_student(student_id)
