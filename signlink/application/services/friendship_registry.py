"""
Friendship registry - friend requests and the status transitions on them.

Entity-level transitions report failure with a boolean; the registry turns a
refused accept/decline into InvalidTransitionError so callers working by id
get a single failure path.
"""

from typing import Optional

from signlink.application.mappers import build_friendship
from signlink.application.services.base_registry import EntityRegistry
from signlink.domain.entities.friendship import Friendship
from signlink.domain.entities.user import User
from signlink.domain.exceptions import InvalidTransitionError
from signlink.domain.value_objects.friendship_status import FriendshipStatus


class FriendshipRegistry(EntityRegistry[Friendship]):
    entity_label = "Friendship"

    def create_friend_request(self, requester: User, recipient: User) -> Friendship:
        """
        Register a pending request from ``requester`` to ``recipient``.

        Raises:
            DomainValidationError: a participant is missing or both are the
                same user
        """
        return self._register(
            build_friendship(
                {
                    "user1": requester,
                    "user2": recipient,
                    "status": FriendshipStatus.PENDING,
                }
            )
        )

    def find_friendship(self, friendship_id: str) -> Optional[Friendship]:
        return self._find(friendship_id)

    def get_friendship(self, friendship_id: str) -> Friendship:
        return self._require(friendship_id)

    def list_friendships(self) -> list[Friendship]:
        return self._snapshot()

    def accept_friend_request(self, friendship_id: str) -> Friendship:
        friendship = self._require(friendship_id)
        status = friendship.status
        if not friendship.accept():
            raise InvalidTransitionError(
                friendship_id, status.value, FriendshipStatus.ACCEPTED.value
            )
        return friendship

    def decline_friend_request(self, friendship_id: str) -> Friendship:
        friendship = self._require(friendship_id)
        status = friendship.status
        if not friendship.decline():
            raise InvalidTransitionError(
                friendship_id, status.value, FriendshipStatus.DECLINED.value
            )
        return friendship

    def block(self, friendship_id: str) -> Friendship:
        friendship = self._require(friendship_id)
        friendship.block()
        return friendship

    def unblock(self, friendship_id: str) -> Friendship:
        friendship = self._require(friendship_id)
        status = friendship.status
        if not friendship.unblock():
            raise InvalidTransitionError(
                friendship_id, status.value, FriendshipStatus.ACCEPTED.value
            )
        return friendship

    def friendships_of(self, user_id: str) -> list[Friendship]:
        """Accepted friendships the user takes part in."""
        return [
            friendship
            for friendship in self._snapshot()
            if friendship.is_accepted() and friendship.involves(user_id)
        ]

    def friends_of(self, user_id: str) -> list[User]:
        return [
            friendship.other_participant(user_id)
            for friendship in self.friendships_of(user_id)
        ]

    def pending_requests_for(self, user_id: str) -> list[Friendship]:
        """Pending requests the user has received."""
        return [
            friendship
            for friendship in self._snapshot()
            if friendship.is_pending()
            and friendship.user2 is not None
            and friendship.user2.id == user_id
        ]

    def are_friends(self, user_id_a: str, user_id_b: str) -> bool:
        return any(
            friendship.involves(user_id_a) and friendship.involves(user_id_b)
            for friendship in self.friendships_of(user_id_a)
        )
