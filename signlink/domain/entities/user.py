"""
User Entity - A community member.

Users are a closed set of tagged variants (``UserKind``). Regular users carry
no extra payload; deaf community members carry an ``AccessibilityProfile``;
instructors carry an ``InstructorProfile``. Role-specific behaviour is looked
up in per-kind tables instead of subclass overrides.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Optional, Union

from signlink.domain.entities.base import BaseEntity
from signlink.domain.exceptions import DomainValidationError

HANDLE_PREFIX = "@"
DEFAULT_AVATAR = "👤"
DEFAULT_SIGN_LANGUAGE = "ASL"


class UserKind(str, Enum):
    REGULAR = "regular"
    DEAF = "deaf"
    INSTRUCTOR = "instructor"


@dataclass
class AccessibilitySettings:
    captions_enabled: bool = True
    vibration_alerts: bool = True
    visual_notifications: bool = True

    def merged(self, **changes: bool) -> AccessibilitySettings:
        known = {f.name for f in fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise DomainValidationError(
                f"Unknown accessibility settings: {', '.join(unknown)}"
            )
        return replace(self, **changes)

    def to_record(self) -> dict[str, bool]:
        return {
            "captionsEnabled": self.captions_enabled,
            "vibrationAlerts": self.vibration_alerts,
            "visualNotifications": self.visual_notifications,
        }


@dataclass
class AccessibilityProfile:
    preferred_sign_language: str = DEFAULT_SIGN_LANGUAGE
    settings: AccessibilitySettings = field(default_factory=AccessibilitySettings)


@dataclass
class InstructorProfile:
    certifications: list[str] = field(default_factory=list)
    specializations: list[str] = field(default_factory=list)
    years_of_experience: int = 0


UserDetails = Union[AccessibilityProfile, InstructorProfile, None]


def check_name(value: Optional[str]) -> None:
    if not value or not value.strip():
        raise DomainValidationError("Name cannot be empty")


def check_handle(value: Optional[str]) -> None:
    if not value or not value.startswith(HANDLE_PREFIX):
        raise DomainValidationError(f"Handle must start with {HANDLE_PREFIX}")


@dataclass(kw_only=True)
class User(BaseEntity):
    name: str = ""
    handle: str = ""
    email: str = ""
    avatar: str = DEFAULT_AVATAR
    bio: str = ""
    is_online: bool = False
    kind: UserKind = UserKind.REGULAR
    details: UserDetails = None

    def __post_init__(self):
        super().__post_init__()
        self.kind = UserKind(self.kind)
        if self.details is None:
            self.details = _DETAILS_FACTORIES[self.kind]()

    # ==================== Validated mutators ====================

    def update_name(self, name: str) -> None:
        check_name(name)
        self.name = name
        self.touch()

    def update_handle(self, handle: str) -> None:
        check_handle(handle)
        self.handle = handle
        self.touch()

    def update_bio(self, bio: str) -> None:
        self.bio = bio or ""
        self.touch()

    def update_avatar(self, avatar: str) -> None:
        self.avatar = avatar or DEFAULT_AVATAR
        self.touch()

    def set_online_status(self, is_online: bool) -> None:
        self.is_online = bool(is_online)
        self.touch()

    # ==================== Deaf community members ====================

    @property
    def accessibility(self) -> AccessibilityProfile:
        self._require_kind(UserKind.DEAF, "accessibility settings")
        return self.details

    def update_preferred_sign_language(self, language: str) -> None:
        profile = self.accessibility
        if not language or not language.strip():
            raise DomainValidationError("Preferred sign language cannot be empty")
        profile.preferred_sign_language = language
        self.touch()

    def update_accessibility_settings(self, **changes: bool) -> AccessibilitySettings:
        """Merge a partial update; unspecified flags keep their current value."""
        profile = self.accessibility
        profile.settings = profile.settings.merged(**changes)
        self.touch()
        return profile.settings

    # ==================== Instructors ====================

    @property
    def instructor_profile(self) -> InstructorProfile:
        self._require_kind(UserKind.INSTRUCTOR, "instructor profile")
        return self.details

    def add_certification(self, certification: str) -> None:
        profile = self.instructor_profile
        if not certification or not certification.strip():
            raise DomainValidationError("Certification cannot be empty")
        profile.certifications.append(certification)
        self.touch()

    def add_specialization(self, specialization: str) -> None:
        profile = self.instructor_profile
        if not specialization or not specialization.strip():
            raise DomainValidationError("Specialization cannot be empty")
        profile.specializations.append(specialization)
        self.touch()

    # ==================== Polymorphic behaviour ====================

    def user_type(self) -> str:
        return USER_TYPE_LABELS[self.kind]

    def display_name(self) -> str:
        return DISPLAY_NAME_FORMATS[self.kind].format(name=self.name)

    def validate(self) -> bool:
        try:
            check_name(self.name)
            check_handle(self.handle)
        except DomainValidationError:
            return False
        return bool(self.email and self.email.strip()) and isinstance(
            self.details, _DETAILS_TYPES[self.kind]
        )

    def serialize(self) -> dict[str, Any]:
        record = {
            **self._base_record(),
            "kind": self.kind.value,
            "name": self.name,
            "handle": self.handle,
            "email": self.email,
            "avatar": self.avatar,
            "bio": self.bio,
            "isOnline": self.is_online,
            "userType": self.user_type(),
            "displayName": self.display_name(),
        }
        record.update(_DETAILS_SERIALIZERS[self.kind](self.details))
        return record

    def _require_kind(self, kind: UserKind, feature: str) -> None:
        if self.kind is not kind:
            raise DomainValidationError(
                f"{self.user_type()} {self.id} has no {feature}"
            )


def _accessibility_record(profile: AccessibilityProfile) -> dict[str, Any]:
    return {
        "preferredSignLanguage": profile.preferred_sign_language,
        "accessibilitySettings": profile.settings.to_record(),
    }


def _instructor_record(profile: InstructorProfile) -> dict[str, Any]:
    return {
        "certifications": list(profile.certifications),
        "specializations": list(profile.specializations),
        "yearsOfExperience": profile.years_of_experience,
    }


USER_TYPE_LABELS = {
    UserKind.REGULAR: "Regular User",
    UserKind.DEAF: "Deaf Community Member",
    UserKind.INSTRUCTOR: "Sign Language Instructor",
}

DISPLAY_NAME_FORMATS = {
    UserKind.REGULAR: "{name}",
    UserKind.DEAF: "{name}",
    UserKind.INSTRUCTOR: "{name} (Instructor)",
}

_DETAILS_FACTORIES = {
    UserKind.REGULAR: lambda: None,
    UserKind.DEAF: AccessibilityProfile,
    UserKind.INSTRUCTOR: InstructorProfile,
}

_DETAILS_TYPES = {
    UserKind.REGULAR: type(None),
    UserKind.DEAF: AccessibilityProfile,
    UserKind.INSTRUCTOR: InstructorProfile,
}

_DETAILS_SERIALIZERS = {
    UserKind.REGULAR: lambda details: {},
    UserKind.DEAF: _accessibility_record,
    UserKind.INSTRUCTOR: _instructor_record,
}
