"""
CallStatus Value Object - Outcome of a video call.
"""

from enum import Enum


class CallStatus(str, Enum):
    MISSED = "missed"
    COMPLETED = "completed"
    DECLINED = "declined"
