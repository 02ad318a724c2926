"""
Unit tests for the entity base contract and the User entity.

Run with: pytest tests/test_user_entity.py -v
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import pytest

from signlink.domain.entities import BaseEntity, Post, User, UserKind
from signlink.domain.entities.user import AccessibilityProfile, InstructorProfile
from signlink.domain.exceptions import DomainValidationError


def make_user(**overrides) -> User:
    data = {"name": "Emma Williams", "handle": "@emmawill", "email": "emma@example.com"}
    data.update(overrides)
    return User(**data)


class TestBaseEntity:
    """Identity, timestamps and the abstract contract."""

    def test_base_entity_cannot_be_instantiated(self):
        """BaseEntity itself is abstract."""
        with pytest.raises(TypeError):
            BaseEntity()

    def test_entity_missing_serialize_cannot_be_instantiated(self):
        """A subclass must implement both validate() and serialize()."""

        @dataclass(kw_only=True)
        class HalfDone(BaseEntity):
            def validate(self) -> bool:
                return True

        with pytest.raises(TypeError):
            HalfDone()

    def test_id_is_generated_when_absent(self):
        """Each entity gets its own generated id."""
        first, second = make_user(), make_user()
        assert first.id and second.id
        assert first.id != second.id

    def test_supplied_id_is_kept(self):
        """An explicit id is not replaced."""
        assert make_user(id="user-42").id == "user-42"

    def test_updated_at_starts_equal_to_created_at(self):
        """A new entity has not been updated yet."""
        user = make_user()
        assert user.updated_at == user.created_at

    def test_touch_advances_updated_at_only(self):
        """touch() moves updated_at and leaves created_at alone."""
        past = datetime.now(timezone.utc) - timedelta(days=1)
        user = make_user(created_at=past)
        user.touch()
        assert user.created_at == past
        assert user.updated_at > past

    def test_naive_timestamps_are_taken_as_utc(self):
        """Naive created_at/updated_at are stored as UTC-aware datetimes."""
        naive = datetime(2024, 1, 1, 9, 30)
        user = make_user(created_at=naive, updated_at=naive + timedelta(hours=1))
        assert user.created_at == datetime(2024, 1, 1, 9, 30, tzinfo=timezone.utc)
        assert user.updated_at.tzinfo is not None

    def test_post_with_naive_timestamp_formats_and_serializes(self):
        """Time formatting works on an entity built with a naive datetime."""
        post = Post(author=make_user(), content="hi", created_at=datetime(2024, 1, 1))
        now = datetime(2024, 1, 1, 2, tzinfo=timezone.utc)
        assert post.formatted_time(now=now) == "2h ago"
        assert post.serialize()["createdAt"] == "2024-01-01T00:00:00+00:00"


class TestUserValidation:
    """Field checks on construction and in the validated setters."""

    def test_valid_user(self):
        """Name, handle with marker and email make a valid user."""
        assert make_user().validate()

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": ""},
            {"name": "   "},
            {"handle": "emmawill"},
            {"handle": ""},
            {"email": ""},
        ],
    )
    def test_invalid_user(self, overrides):
        """Blank name, unmarked handle or missing email fail validation."""
        assert not make_user(**overrides).validate()

    def test_update_name_rejects_empty_without_mutating(self):
        """A rejected name leaves the name and timestamp untouched."""
        user = make_user()
        before = user.updated_at
        with pytest.raises(DomainValidationError):
            user.update_name("  ")
        assert user.name == "Emma Williams"
        assert user.updated_at == before

    def test_update_handle_requires_marker(self):
        """Handles must start with @."""
        user = make_user()
        with pytest.raises(DomainValidationError):
            user.update_handle("emma")
        assert user.handle == "@emmawill"

        user.update_handle("@emma")
        assert user.handle == "@emma"

    def test_bio_avatar_and_online_status(self):
        """The unchecked profile setters store their values."""
        user = make_user()
        user.update_bio("Sign language enthusiast")
        user.update_avatar("👩‍🦰")
        user.set_online_status(True)
        assert user.bio == "Sign language enthusiast"
        assert user.avatar == "👩‍🦰"
        assert user.is_online is True


class TestUserVariants:
    """Role labels and variant payloads."""

    def test_user_type_labels(self):
        """Each kind has its own role label."""
        assert make_user().user_type() == "Regular User"
        assert make_user(kind=UserKind.DEAF).user_type() == "Deaf Community Member"
        assert make_user(kind="instructor").user_type() == "Sign Language Instructor"

    def test_display_name_suffix_for_instructors_only(self):
        """Only instructors get a suffix on their display name."""
        assert make_user().display_name() == "Emma Williams"
        assert make_user(kind="deaf").display_name() == "Emma Williams"
        assert make_user(kind="instructor").display_name() == "Emma Williams (Instructor)"

    def test_variant_payload_defaults(self):
        """Deaf members and instructors get default payloads."""
        assert make_user().details is None
        deaf = make_user(kind="deaf")
        assert isinstance(deaf.details, AccessibilityProfile)
        assert deaf.accessibility.preferred_sign_language == "ASL"
        assert deaf.accessibility.settings.captions_enabled is True
        assert isinstance(make_user(kind="instructor").details, InstructorProfile)

    def test_accessibility_update_merges_flags(self):
        """Updating one flag keeps the others."""
        deaf = make_user(kind="deaf")
        settings = deaf.update_accessibility_settings(vibration_alerts=False)
        assert settings.vibration_alerts is False
        assert settings.captions_enabled is True
        assert settings.visual_notifications is True

    def test_accessibility_update_rejects_unknown_flag(self):
        """An unknown flag rejects the whole update."""
        deaf = make_user(kind="deaf")
        with pytest.raises(DomainValidationError):
            deaf.update_accessibility_settings(captions_enabled=False, loud_mode=True)
        assert deaf.accessibility.settings.captions_enabled is True

    def test_preferred_sign_language(self):
        """Deaf members can change their preferred sign language."""
        deaf = make_user(kind="deaf")
        deaf.update_preferred_sign_language("BSL")
        assert deaf.accessibility.preferred_sign_language == "BSL"

    def test_instructor_lists_append(self):
        """Certifications and specializations keep insertion order."""
        instructor = make_user(kind="instructor")
        instructor.add_certification("ASLTA")
        instructor.add_specialization("Fingerspelling")
        instructor.add_specialization("Storytelling")
        assert instructor.instructor_profile.certifications == ["ASLTA"]
        assert instructor.instructor_profile.specializations == [
            "Fingerspelling",
            "Storytelling",
        ]

    def test_variant_only_operations_are_rejected_on_other_kinds(self):
        """Kind-specific operations raise on the wrong kind."""
        regular = make_user()
        with pytest.raises(DomainValidationError):
            regular.update_accessibility_settings(captions_enabled=False)
        with pytest.raises(DomainValidationError):
            regular.add_certification("ASLTA")

    def test_mismatched_payload_fails_validation(self):
        """A payload of the wrong type makes the user invalid."""
        assert not make_user(kind="deaf", details=InstructorProfile()).validate()


class TestUserSerialization:
    """Plain-record output."""

    def test_serialize_includes_role_fields(self):
        """Records carry kind, computed labels and variant fields in camelCase."""
        record = make_user(kind="deaf", is_online=True).serialize()
        assert record["kind"] == "deaf"
        assert record["handle"] == "@emmawill"
        assert record["isOnline"] is True
        assert record["userType"] == "Deaf Community Member"
        assert record["preferredSignLanguage"] == "ASL"
        assert record["accessibilitySettings"] == {
            "captionsEnabled": True,
            "vibrationAlerts": True,
            "visualNotifications": True,
        }
        assert record["createdAt"].endswith("+00:00")

    def test_instructor_record(self):
        """Instructor records carry their profile and no accessibility block."""
        instructor = make_user(kind="instructor")
        instructor.add_certification("ASLTA")
        record = instructor.serialize()
        assert record["certifications"] == ["ASLTA"]
        assert record["yearsOfExperience"] == 0
        assert record["displayName"] == "Emma Williams (Instructor)"
        assert "accessibilitySettings" not in record
