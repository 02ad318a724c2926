"""
Record → entity mapping.

Every builder parses the inbound record through its DTO, applies the entity
defaults for absent keys and picks the variant from a discriminator table.
Builders do not validate; registries call ``validate()`` before inserting.

Nested references (author, sender, receiver, instructor, user1/user2) may be
live ``User`` objects or serialized user records; records are rebuilt with
``build_user``.
"""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from signlink.application.dto import (
    CourseRecord,
    FriendshipRecord,
    MessageRecord,
    PostRecord,
    UserRecord,
    VideoRecord,
)
from signlink.application.dto.base import EntityRecord
from signlink.domain.entities import (
    AccessibilityProfile,
    AccessibilitySettings,
    CallDetails,
    Course,
    Friendship,
    InstructorProfile,
    Message,
    MessageKind,
    Post,
    PostKind,
    User,
    UserKind,
    Video,
    VideoMedia,
)
from signlink.domain.exceptions import DomainValidationError

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Enum)
R = TypeVar("R", bound=BaseModel)


def parse_record(model: type[R], record: Any) -> R:
    """Validate a plain record against its DTO, raising DomainValidationError."""
    if isinstance(record, model):
        return record
    if not isinstance(record, Mapping):
        raise DomainValidationError(
            f"Expected a record mapping for {model.__name__}, got {type(record).__name__}"
        )
    try:
        return model.model_validate(dict(record))
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise DomainValidationError(f"Invalid {model.__name__}: {problems}") from e


def resolve_kind(kind_type: type[K], value: Optional[str], default: K) -> K:
    """Map a discriminator to its variant; unknown values fall back to ``default``."""
    if value is None:
        return default
    try:
        return kind_type(value)
    except ValueError:
        logger.warning(
            "Unknown %s discriminator %r, using %s",
            kind_type.__name__,
            value,
            default.value,
        )
        return default


def _identity(dto: EntityRecord) -> dict[str, Any]:
    identity = _present(dto, "created_at", "updated_at")
    if dto.id:
        identity["id"] = dto.id
    return identity


def _resolve_user(reference: Any, role: str) -> Optional[User]:
    if reference is None or isinstance(reference, User):
        return reference
    if isinstance(reference, Mapping):
        return build_user(reference)
    raise DomainValidationError(
        f"{role} must be a User or a user record, got {type(reference).__name__}"
    )


def _present(dto: BaseModel, *names: str) -> dict[str, Any]:
    return {
        name: getattr(dto, name) for name in names if getattr(dto, name) is not None
    }


# ==================== Users ====================


def _accessibility_profile(dto: UserRecord) -> AccessibilityProfile:
    settings = AccessibilitySettings()
    if dto.accessibility_settings is not None:
        settings = settings.merged(
            **dto.accessibility_settings.model_dump(exclude_none=True)
        )
    return AccessibilityProfile(
        **_present(dto, "preferred_sign_language"), settings=settings
    )


def _instructor_profile(dto: UserRecord) -> InstructorProfile:
    return InstructorProfile(
        **_present(dto, "certifications", "specializations", "years_of_experience")
    )


USER_DETAILS_BUILDERS = {
    UserKind.REGULAR: lambda dto: None,
    UserKind.DEAF: _accessibility_profile,
    UserKind.INSTRUCTOR: _instructor_profile,
}


def build_user(record: Any, user_type: Optional[str] = None) -> User:
    dto = parse_record(UserRecord, record)
    kind = resolve_kind(UserKind, user_type or dto.kind, UserKind.REGULAR)
    return User(
        **_identity(dto),
        **_present(dto, "name", "handle", "email", "avatar", "bio", "is_online"),
        kind=kind,
        details=USER_DETAILS_BUILDERS[kind](dto),
    )


# ==================== Posts ====================


def _video_media(dto: PostRecord) -> VideoMedia:
    return VideoMedia(**_present(dto, "video_url", "thumbnail", "duration", "views"))


POST_MEDIA_BUILDERS = {
    PostKind.REGULAR: lambda dto: None,
    PostKind.VIDEO: _video_media,
}


def build_post(record: Any, post_type: Optional[str] = None) -> Post:
    dto = parse_record(PostRecord, record)
    kind = resolve_kind(PostKind, post_type or dto.kind, PostKind.REGULAR)
    return Post(
        **_identity(dto),
        **_present(dto, "content", "likes", "comments", "shares", "is_public"),
        author=_resolve_user(dto.author, "author"),
        kind=kind,
        media=POST_MEDIA_BUILDERS[kind](dto),
    )


# ==================== Messages ====================


def _call_details(dto: MessageRecord) -> CallDetails:
    return CallDetails(**_present(dto, "duration", "call_status"))


MESSAGE_CALL_BUILDERS = {
    MessageKind.TEXT: lambda dto: None,
    MessageKind.VIDEO_CALL: _call_details,
}


def build_message(record: Any, message_type: Optional[str] = None) -> Message:
    dto = parse_record(MessageRecord, record)
    kind = resolve_kind(MessageKind, message_type or dto.kind, MessageKind.TEXT)
    return Message(
        **_identity(dto),
        **_present(dto, "content", "is_read"),
        sender=_resolve_user(dto.sender, "sender"),
        receiver=_resolve_user(dto.receiver, "receiver"),
        kind=kind,
        call=MESSAGE_CALL_BUILDERS[kind](dto),
    )


# ==================== Videos & courses ====================


def build_video(record: Any) -> Video:
    dto = parse_record(VideoRecord, record)
    return Video(
        **_identity(dto),
        **_present(
            dto,
            "title",
            "description",
            "thumbnail",
            "duration",
            "category",
            "difficulty",
            "views",
            "likes",
        ),
        instructor=_resolve_user(dto.instructor, "instructor"),
    )


def _resolve_video(reference: Any) -> Video:
    if isinstance(reference, Video):
        return reference
    if isinstance(reference, Mapping):
        return build_video(reference)
    raise DomainValidationError("Must be a Video instance")


def build_course(record: Any) -> Course:
    dto = parse_record(CourseRecord, record)
    return Course(
        **_identity(dto),
        **_present(dto, "title", "description", "category"),
        instructor=_resolve_user(dto.instructor, "instructor"),
        videos=[_resolve_video(video) for video in dto.videos or []],
        enrolled_students=list(dict.fromkeys(dto.enrolled_students or [])),
    )


# ==================== Friendships ====================


def build_friendship(record: Any) -> Friendship:
    dto = parse_record(FriendshipRecord, record)
    return Friendship(
        **_identity(dto),
        **_present(dto, "status", "mutual_friends"),
        user1=_resolve_user(dto.user1, "user1"),
        user2=_resolve_user(dto.user2, "user2"),
    )
