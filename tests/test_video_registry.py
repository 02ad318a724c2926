"""
Tests for VideoRegistry: the video collection, ranking and courses.

Run with: pytest tests/test_video_registry.py -v
"""

import pytest

from signlink.domain.exceptions import DomainValidationError, EntityNotFoundError


@pytest.fixture()
def lessons(videos, instructor):
    return [
        videos.create_video(
            {
                "title": "Alphabet A-M",
                "category": "alphabet",
                "duration": 300,
                "instructor": instructor,
                "views": 100,
                "likes": 5,
            }
        ),
        videos.create_video(
            {
                "title": "Numbers 1-20",
                "category": "numbers",
                "duration": 240,
                "difficulty": "intermediate",
                "instructor": instructor,
                "views": 10,
                "likes": 40,
            }
        ),
        videos.create_video(
            {
                "title": "Alphabet N-Z",
                "category": "alphabet",
                "duration": 320,
                "difficulty": "advanced",
                "views": 2,
            }
        ),
    ]


class TestVideos:
    """Video factory, filters and ranking."""

    def test_defaults(self, videos):
        """New videos are beginner level with no views or likes."""
        video = videos.create_video(
            {"title": "Greetings", "category": "basics", "duration": 60}
        )
        assert video.difficulty == "beginner"
        assert (video.views, video.likes) == (0, 0)

    def test_fractional_duration_is_accepted(self, videos, instructor):
        """A record with fractional seconds registers a valid video."""
        video = videos.create_video(
            {
                "title": "ABC",
                "category": "alphabet",
                "duration": 90.5,
                "instructor": instructor,
            }
        )
        assert video.duration == 90.5
        assert video.formatted_duration() == "1:30"
        assert videos.get_video(video.id) is video

    @pytest.mark.parametrize(
        "record",
        [
            {"category": "basics", "duration": 60},
            {"title": "Greetings", "duration": 60},
            {"title": "Greetings", "category": "basics", "duration": 0},
            {"title": "Greetings", "category": "basics", "duration": -0.5},
            {
                "title": "Greetings",
                "category": "basics",
                "duration": 60,
                "difficulty": "expert",
            },
        ],
    )
    def test_invalid_video_is_not_registered(self, videos, record):
        """Missing fields, non-positive durations and unknown tiers are refused."""
        with pytest.raises(DomainValidationError):
            videos.create_video(record)
        assert videos.list_videos() == []

    def test_filters(self, videos, lessons, instructor):
        """Videos filter by category, difficulty and instructor."""
        assert videos.videos_by_category("alphabet") == [lessons[0], lessons[2]]
        assert videos.videos_by_difficulty("intermediate") == [lessons[1]]
        assert videos.videos_by_instructor(instructor.id) == lessons[:2]

    def test_popular_videos(self, videos, lessons):
        """Most popular first, truncated to the limit."""
        # scores: 60, 85, 1
        assert videos.popular_videos() == [lessons[1], lessons[0], lessons[2]]
        assert videos.popular_videos(1) == [lessons[1]]

    def test_engagement_by_id(self, videos, lessons):
        """Views and likes change through the registry."""
        video_id = lessons[2].id
        videos.add_view(video_id)
        videos.like_video(video_id)
        video = videos.unlike_video(video_id)
        assert (video.views, video.likes) == (3, 0)
        with pytest.raises(EntityNotFoundError):
            videos.like_video("missing")


class TestCourses:
    """Course factory, composition and enrollment."""

    def test_create_course(self, videos, lessons, instructor):
        """A course aggregates its videos."""
        course = videos.create_course(
            {"title": "ASL 101", "instructor": instructor, "videos": lessons[:2]}
        )
        assert videos.get_course(course.id) is course
        assert course.total_duration() == 540
        assert course.average_difficulty() == 1.5

    def test_course_requires_videos(self, videos, instructor):
        """A course without videos is refused."""
        with pytest.raises(DomainValidationError):
            videos.create_course({"title": "Empty", "instructor": instructor})
        assert videos.list_courses() == []

    def test_course_rejects_invalid_member_video(self, videos, instructor):
        """An invalid video record rejects the course."""
        with pytest.raises(DomainValidationError):
            videos.create_course(
                {
                    "title": "Broken",
                    "instructor": instructor,
                    "videos": [{"title": "", "category": "x", "duration": 10}],
                }
            )

    def test_video_records_are_not_added_to_the_collection(self, videos, instructor):
        """Video records nested in a course stay out of the video collection."""
        course = videos.create_course(
            {
                "title": "ASL 101",
                "instructor": instructor,
                "videos": [{"title": "Intro", "category": "basics", "duration": 90}],
            }
        )
        assert course.video_count() == 1
        assert videos.list_videos() == []

    def test_add_and_remove_videos(self, videos, lessons, instructor):
        """Registered videos can be added to and removed from a course."""
        course = videos.create_course(
            {"title": "ASL 101", "instructor": instructor, "videos": [lessons[0]]}
        )
        videos.add_video_to_course(course.id, lessons[1].id)
        assert course.videos == lessons[:2]

        videos.remove_video_from_course(course.id, lessons[0].id)
        assert course.videos == [lessons[1]]

        with pytest.raises(EntityNotFoundError):
            videos.add_video_to_course(course.id, "missing")

    def test_enrollment(self, videos, lessons, instructor, sarah, mike):
        """Enrollment is idempotent and queryable per student."""
        course = videos.create_course(
            {"title": "ASL 101", "instructor": instructor, "videos": lessons}
        )
        videos.enroll_student(course.id, sarah)
        videos.enroll_student(course.id, sarah)

        assert course.enrolled_count() == 1
        assert videos.courses_for_student(sarah.id) == [course]
        assert videos.courses_for_student(mike.id) == []

    def test_missing_course(self, videos, sarah):
        """Unknown course ids give None on find and raise on enroll."""
        assert videos.find_course("missing") is None
        with pytest.raises(EntityNotFoundError):
            videos.enroll_student("missing", sarah)
