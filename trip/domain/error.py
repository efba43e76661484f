"""Domain layer errors.

Every error carries an ``ErrorKind`` so the application layer can turn it
into a discriminated response without inspecting messages.
"""

from trip.domain.value.types import ErrorKind


class DomainError(Exception):
    """Base domain error."""

    kind: ErrorKind = ErrorKind.VALIDATION


class ValidationError(DomainError):
    """A required field is blank or a value is out of range."""

    kind = ErrorKind.VALIDATION


class NotFoundError(DomainError):
    """Raised when a requested resource is not found in the given trip."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when the caller lacks the relationship an action requires."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self, action: str, trip_id: str, user_id: str):
        self.action = action
        super().__init__(f"User {user_id} may not {action} in trip {trip_id}")


class InvalidOrExpiredCodeError(DomainError):
    """Raised for any code that cannot be redeemed.

    Wrong, revoked, expired and exhausted codes all share this error and
    its message so callers cannot tell which case applies.
    """

    kind = ErrorKind.INVALID_OR_EXPIRED_CODE

    def __init__(self) -> None:
        super().__init__("Invalid or expired code")
