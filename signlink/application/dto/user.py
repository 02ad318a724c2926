"""User record DTOs."""

from typing import Optional

from pydantic import AliasChoices, Field

from signlink.application.dto.base import EntityRecord, RecordModel


class AccessibilitySettingsRecord(RecordModel):
    captions_enabled: Optional[bool] = None
    vibration_alerts: Optional[bool] = None
    visual_notifications: Optional[bool] = None


class UserRecord(EntityRecord):
    kind: Optional[str] = None
    name: Optional[str] = None
    # "username" is the key the hosted document store uses
    handle: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("handle", "username")
    )
    email: Optional[str] = None
    avatar: Optional[str] = None
    bio: Optional[str] = None
    is_online: Optional[bool] = None

    # Deaf community members
    preferred_sign_language: Optional[str] = None
    accessibility_settings: Optional[AccessibilitySettingsRecord] = None

    # Instructors
    certifications: Optional[list[str]] = None
    specializations: Optional[list[str]] = None
    years_of_experience: Optional[int] = Field(default=None, ge=0)
