"""
DomainValidationError - Raised for malformed records, invalid entities and
rejected setter input. Nothing is mutated when it is raised.
"""


class DomainValidationError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
