"""
User registry - creation, lookup, search and profile updates for users.
"""

import logging
from typing import Any, Callable, Mapping, Optional

from pydantic.alias_generators import to_camel

from signlink.application.dto import UserRecord
from signlink.application.mappers import build_user, parse_record
from signlink.application.services.base_registry import EntityRegistry
from signlink.domain.entities.user import User, UserKind, check_handle, check_name
from signlink.domain.exceptions import DomainValidationError
from signlink.domain.ports.repositories import EntityRepository

logger = logging.getLogger(__name__)


class UserRegistry(EntityRegistry[User]):
    entity_label = "User"

    def __init__(self, repository: EntityRepository[User]):
        super().__init__(repository)
        self._current_user: Optional[User] = None

    def create_user(
        self, record: Mapping[str, Any], user_type: Optional[str] = None
    ) -> User:
        """
        Build, validate and register a user.

        Args:
            record: Plain user record (name, handle/username, email, ...)
            user_type: "regular" | "deaf" | "instructor"; unknown values fall
                back to a regular user

        Raises:
            DomainValidationError: record is malformed or the user is invalid
        """
        return self._register(build_user(record, user_type))

    def find_user(self, user_id: str) -> Optional[User]:
        return self._find(user_id)

    def get_user(self, user_id: str) -> User:
        return self._require(user_id)

    def list_users(self) -> list[User]:
        return self._snapshot()

    def update_user(self, user_id: str, updates: Mapping[str, Any]) -> User:
        """
        Apply several profile updates at once.

        Every value is checked before the first one is applied, so a rejected
        update leaves the user untouched.

        Keys follow the record format accepted by ``create_user``: snake_case
        or camelCase, ``username`` for the handle, and values coerced the same
        way (``"false"`` is False for ``isOnline``). Null values are skipped.
        """
        user = self._require(user_id)
        unknown = sorted(key for key in updates if key not in _UPDATE_KEYS)
        if unknown:
            raise DomainValidationError(
                f"Cannot update user fields: {', '.join(unknown)}"
            )
        changes = parse_record(UserRecord, updates).model_dump(exclude_unset=True)
        if "name" in changes:
            check_name(changes["name"])
        if "handle" in changes:
            check_handle(changes["handle"])
        if "preferred_sign_language" in changes:
            language = changes["preferred_sign_language"]
            if user.kind is not UserKind.DEAF:
                raise DomainValidationError(
                    f"{user.user_type()} {user.id} has no accessibility settings"
                )
            if not language.strip():
                raise DomainValidationError("Preferred sign language cannot be empty")

        for field_name, value in changes.items():
            _UPDATERS[field_name](user, value)
        logger.debug("Updated user %s fields %s", user_id, sorted(changes))
        return user

    def delete_user(self, user_id: str) -> bool:
        if self._current_user is not None and self._current_user.id == user_id:
            self._current_user = None
        return self._delete(user_id)

    def set_current_user(self, user: Optional[User]) -> None:
        self._current_user = user

    def current_user(self) -> Optional[User]:
        return self._current_user

    def search_users(self, query: str) -> list[User]:
        """Case-insensitive substring match on name or handle."""
        needle = (query or "").lower()
        return [
            user
            for user in self._snapshot()
            if needle in user.name.lower() or needle in user.handle.lower()
        ]

    def online_users(self) -> list[User]:
        return [user for user in self._snapshot() if user.is_online]


_UPDATERS: dict[str, Callable[[User, Any], None]] = {
    "name": User.update_name,
    "handle": User.update_handle,
    "bio": User.update_bio,
    "avatar": User.update_avatar,
    "is_online": User.set_online_status,
    "preferred_sign_language": User.update_preferred_sign_language,
}

_UPDATE_KEYS = {
    key for name in _UPDATERS for key in (name, to_camel(name))
} | {"username"}
