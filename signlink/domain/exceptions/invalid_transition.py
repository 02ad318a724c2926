"""
InvalidTransitionError - Raised by registries when a friendship cannot move
to the requested status (e.g. accepting a request that is no longer pending).
"""

from signlink.domain.exceptions.validation_error import DomainValidationError


class InvalidTransitionError(DomainValidationError):
    """Exception raised for a rejected friendship status transition."""

    def __init__(self, friendship_id: str, current_status: str, target_status: str):
        super().__init__(
            f"Cannot move friendship {friendship_id} from "
            f"'{current_status}' to '{target_status}'"
        )
        self.friendship_id = friendship_id
        self.current_status = current_status
        self.target_status = target_status
