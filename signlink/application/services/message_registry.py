"""
Message registry - sends messages, groups them into two-party conversation
threads and tracks read state.

Each message is indexed by id and appended to the thread for its
ConversationKey, so a thread collects both directions of a conversation.
"""

import logging
from typing import Any, Mapping, Optional

from signlink.application.mappers import build_message
from signlink.application.services.base_registry import EntityRegistry
from signlink.domain.entities.message import Message
from signlink.domain.ports.repositories import EntityRepository
from signlink.domain.value_objects.conversation_key import ConversationKey

logger = logging.getLogger(__name__)


class MessageRegistry(EntityRegistry[Message]):
    entity_label = "Message"

    def __init__(self, repository: EntityRepository[Message]):
        super().__init__(repository)
        self._conversations: dict[ConversationKey, list[Message]] = {}

    def send_message(
        self, record: Mapping[str, Any], message_type: Optional[str] = None
    ) -> Message:
        """
        Build, validate, register and thread a message.

        Args:
            record: Plain message record (sender, receiver, content, ...)
            message_type: "text" | "video-call"; unknown values fall back to
                a text message

        Raises:
            DomainValidationError: record is malformed or the message is
                missing its sender, receiver or content
        """
        message = self._register(build_message(record, message_type))
        key = message.conversation_key
        self._conversations.setdefault(key, []).append(message)
        logger.debug("Appended message %s to conversation %s", message.id, key)
        return message

    def find_message(self, message_id: str) -> Optional[Message]:
        return self._find(message_id)

    def get_message(self, message_id: str) -> Message:
        return self._require(message_id)

    def list_messages(self) -> list[Message]:
        return self._snapshot()

    def conversation(self, user_id_a: str, user_id_b: str) -> list[Message]:
        """All messages between two users, oldest first, in either direction."""
        key = ConversationKey.between(user_id_a, user_id_b)
        return list(self._conversations.get(key, []))

    def conversations_for(self, user_id: str) -> dict[ConversationKey, list[Message]]:
        return {
            key: list(thread)
            for key, thread in self._conversations.items()
            if key.involves(user_id)
        }

    def mark_as_read(self, message_id: str) -> Message:
        message = self._require(message_id)
        message.mark_as_read()
        return message

    def unread_messages(self, user_id: str) -> list[Message]:
        return [
            message
            for message in self._snapshot()
            if message.is_addressed_to(user_id) and not message.is_read
        ]

    def unread_count(self, user_id: str) -> int:
        return len(self.unread_messages(user_id))
