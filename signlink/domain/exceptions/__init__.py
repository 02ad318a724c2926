"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by entities and registries and propagate
synchronously to the caller. The hosting application maps them to
user-facing messages.
"""

from signlink.domain.exceptions.entity_not_found import EntityNotFoundError
from signlink.domain.exceptions.validation_error import DomainValidationError
from signlink.domain.exceptions.invalid_transition import InvalidTransitionError

__all__ = [
    "EntityNotFoundError",
    "DomainValidationError",
    "InvalidTransitionError",
]
