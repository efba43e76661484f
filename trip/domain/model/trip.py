"""Trip entity."""

from datetime import datetime

from pydantic import Field

from trip.domain.model.common import DomainModel, utcnow
from trip.domain.value import TripId, UserId


class Trip(DomainModel):
    """A planned trip with exactly one organizer.

    The organizer is an authority over the trip whether or not they hold a
    participant row.
    """

    id: TripId
    name: str
    organizer_id: UserId
    created_at: datetime = Field(default_factory=utcnow)
