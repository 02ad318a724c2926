"""
EntityNotFoundError - Raised when a registry is asked for an id it does not hold.
"""


class EntityNotFoundError(Exception):
    """Exception raised when a requested entity is not registered."""

    def __init__(self, entity_label: str, entity_id: str):
        self.entity_label = entity_label
        self.entity_id = entity_id
        self.message = f"{entity_label} {entity_id} not found"
        super().__init__(self.message)
