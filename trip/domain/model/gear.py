"""Gear checklist entities."""

from datetime import datetime

from pydantic import Field

from trip.domain.model.common import DomainModel, utcnow
from trip.domain.value import GearAssignmentId, GearItemId, ParticipantId, TripId


class GearItem(DomainModel):
    """An item on a trip's shared gear checklist."""

    id: GearItemId
    trip_id: TripId
    name: str
    created_at: datetime = Field(default_factory=utcnow)


class GearAssignment(DomainModel):
    """A participant bringing some quantity of a gear item.

    Business rules:
    - One assignment per (gear item, participant)
    - Quantity is at least 1
    """

    id: GearAssignmentId
    gear_id: GearItemId
    participant_id: ParticipantId
    quantity: int = Field(default=1, ge=1)
    created_at: datetime = Field(default_factory=utcnow)
