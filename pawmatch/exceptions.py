"""
Exceptions raised by the matching engine.
"""

from typing import Optional


class MatchingError(Exception):
    """Base exception for matching errors."""
    pass


class PreconditionError(MatchingError):
    """Raised when adopter preferences are missing or incomplete."""
    pass


class NotFoundError(MatchingError):
    """Raised when a referenced entity cannot be located."""

    def __init__(self, entity: str, entity_id: Optional[str] = None):
        self.entity = entity
        self.entity_id = entity_id
        if entity_id:
            message = f"{entity} with id {entity_id} not found"
        else:
            message = f"{entity} not found"
        super().__init__(message)
