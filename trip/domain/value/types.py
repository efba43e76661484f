"""Domain value types for trip planning.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from trip.domain.value.common import RootValueObject


class ErrorKind(str, Enum):
    """Failure kinds reported at the engine boundary."""

    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    INVALID_OR_EXPIRED_CODE = "invalid_or_expired_code"
    VALIDATION = "validation"


class TripRole(str, Enum):
    """Relationship between a caller and a trip."""

    ORGANIZER = "organizer"
    MEMBER = "member"
    NONE = "none"

    @property
    def is_member(self) -> bool:
        """Organizers count as members even without a participant row."""
        return self is not TripRole.NONE


class ProposalKind(str, Enum):
    """Kind of proposal a trip collects.

    Date options are votable but never chosen; transportations are chosen
    but never voted on.
    """

    DATE = "date"
    DESTINATION = "destination"
    TERM = "term"
    TRANSPORTATION = "transportation"

    @property
    def votable(self) -> bool:
        return self in (ProposalKind.DATE, ProposalKind.DESTINATION, ProposalKind.TERM)

    @property
    def exclusive(self) -> bool:
        return self is not ProposalKind.DATE


class DisplayName(RootValueObject[str]):
    """Participant display name, trimmed and 1-100 characters."""

    @field_validator("root")
    @classmethod
    def validate_display_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Display name must not be blank")
        if len(v) > 100:
            raise ValueError("Display name must be at most 100 characters")
        return v
