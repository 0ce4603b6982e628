"""
Domain exceptions raised by the store and the service layer.

All of them derive from ``ValueError`` so callers that only care about
"the request could not be satisfied" can keep catching ``ValueError``.
Routers translate them into HTTP 404 and 400 responses.
"""

from typing import Optional


class NotFoundError(ValueError):
    """Raised when a user, service or booking id does not exist."""

    def __init__(self, entity: str, entity_id: int) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class BookingValidationError(ValueError):
    """Input that passed schema validation but breaks a domain rule.

    ``field`` names the offending request field in its camelCase wire
    form so it can be echoed back in the error envelope.
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        self.message = message
        self.field = field
        super().__init__(message)


class InvalidTransitionError(BookingValidationError):
    """A status change not allowed by the booking lifecycle."""

    def __init__(self, current: str, target: str) -> None:
        self.current = current
        self.target = target
        super().__init__(
            f"Cannot change booking status from '{current}' to '{target}'",
            field="status",
        )
