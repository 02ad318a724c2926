"""
Message Entity - A direct message between two users.

Video-call records are messages tagged ``video-call`` that also carry the call
duration and outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from enum import Enum
from typing import Any, Callable, Optional

from signlink.domain.entities.base import BaseEntity, format_duration, serialize_ref
from signlink.domain.entities.user import User
from signlink.domain.exceptions import DomainValidationError
from signlink.domain.value_objects.call_status import CallStatus
from signlink.domain.value_objects.conversation_key import ConversationKey


class MessageKind(str, Enum):
    TEXT = "text"
    VIDEO_CALL = "video-call"


@dataclass
class CallDetails:
    duration: float = 0
    call_status: CallStatus = CallStatus.MISSED


@dataclass(kw_only=True)
class Message(BaseEntity):
    sender: Optional[User] = None
    receiver: Optional[User] = None
    content: str = ""
    is_read: bool = False
    kind: MessageKind = MessageKind.TEXT
    call: Optional[CallDetails] = None

    def __post_init__(self):
        super().__post_init__()
        self.kind = MessageKind(self.kind)
        if self.kind is MessageKind.VIDEO_CALL and self.call is None:
            self.call = CallDetails()

    @property
    def conversation_key(self) -> ConversationKey:
        if self.sender is None or self.receiver is None:
            raise DomainValidationError(f"Message {self.id} has no participants")
        return ConversationKey.between(self.sender.id, self.receiver.id)

    def mark_as_read(self) -> None:
        if not self.is_read:
            self.is_read = True
            self.touch()

    def is_sent_by(self, user: Optional[User]) -> bool:
        return (
            self.sender is not None and user is not None and self.sender.id == user.id
        )

    def is_addressed_to(self, user_id: str) -> bool:
        return self.receiver is not None and self.receiver.id == user_id

    def formatted_time(self, tz: Optional[tzinfo] = None) -> str:
        """12-hour send time in ``tz``, or in the host's local zone by default."""
        return self.created_at.astimezone(tz).strftime("%I:%M %p")

    # ==================== Video calls ====================

    def set_duration(self, seconds: float) -> None:
        call = self._require_call()
        if seconds < 0:
            raise DomainValidationError("Call duration cannot be negative")
        call.duration = seconds
        self.touch()

    def set_call_status(self, status: str) -> None:
        call = self._require_call()
        try:
            call.call_status = CallStatus(status)
        except ValueError:
            raise DomainValidationError(f"Invalid call status: {status}")
        self.touch()

    def formatted_duration(self) -> str:
        return format_duration(self._require_call().duration)

    def validate(self) -> bool:
        return bool(
            self.sender is not None
            and self.receiver is not None
            and self.content
            and self.content.strip()
        ) and _VARIANT_CHECKS[self.kind](self)

    def serialize(self) -> dict[str, Any]:
        record = {
            **self._base_record(),
            "kind": self.kind.value,
            "sender": serialize_ref(self.sender),
            "receiver": serialize_ref(self.receiver),
            "content": self.content,
            "isRead": self.is_read,
            "time": self.formatted_time(),
        }
        record.update(_VARIANT_SERIALIZERS[self.kind](self))
        return record

    def _require_call(self) -> CallDetails:
        if self.call is None:
            raise DomainValidationError(f"Message {self.id} is not a video call")
        return self.call


def _call_record(message: Message) -> dict[str, Any]:
    return {
        "duration": message.call.duration,
        "callStatus": message.call.call_status.value,
        "formattedDuration": format_duration(message.call.duration),
    }


_VARIANT_CHECKS: dict[MessageKind, Callable[[Message], bool]] = {
    MessageKind.TEXT: lambda message: True,
    MessageKind.VIDEO_CALL: lambda message: message.call is not None
    and message.call.duration >= 0,
}

_VARIANT_SERIALIZERS: dict[MessageKind, Callable[[Message], dict[str, Any]]] = {
    MessageKind.TEXT: lambda message: {},
    MessageKind.VIDEO_CALL: _call_record,
}
