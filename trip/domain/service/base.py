"""Base service class for domain services."""

from typing import Callable, Optional, TypeVar

from pydantic import ValidationError as PydanticValidationError

from trip.domain.error import ValidationError

T = TypeVar("T")


class Service:
    """Base class for all domain services.

    Domain services hold the business rules that span several entities.
    They raise ``DomainError`` subclasses and leave transaction boundaries
    to the application layer.
    """

    @staticmethod
    def _validated(build: Callable[[], T], message: Optional[str] = None) -> T:
        """Build a domain object, turning pydantic failures into ValidationError."""
        try:
            return build()
        except PydanticValidationError as e:
            detail = message or "; ".join(err["msg"] for err in e.errors())
            raise ValidationError(detail) from e
