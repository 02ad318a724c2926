"""Message record DTO."""

from typing import Any, Optional

from pydantic import Field

from signlink.application.dto.base import EntityRecord
from signlink.domain.value_objects.call_status import CallStatus


class MessageRecord(EntityRecord):
    kind: Optional[str] = None
    sender: Optional[Any] = None
    receiver: Optional[Any] = None
    content: Optional[str] = None
    is_read: Optional[bool] = None

    # Video calls
    duration: Optional[float] = Field(default=None, ge=0)
    call_status: Optional[CallStatus] = None
