"""Trip domain service."""

from uuid import uuid4

import logfire

from trip.domain.error import ValidationError
from trip.domain.model import Participant, Trip
from trip.domain.repository import TripRepository
from trip.domain.value import TripId, TripRole, UserId

from .access_service import TripAccessService
from .base import Service
from .participant_service import ParticipantService


class TripService(Service):
    """Domain service for creating and reading trips."""

    def __init__(
        self,
        trip_repository: TripRepository,
        participant_service: ParticipantService,
        access_service: TripAccessService,
    ) -> None:
        self.trip_repository = trip_repository
        self.participant_service = participant_service
        self.access_service = access_service

    async def create_trip(self, name: str, organizer_id: UserId) -> tuple[Trip, Participant]:
        """Create a trip organized by the caller.

        The organizer also gets a participant row so they can vote and be
        assigned gear like everyone else.

        Args:
            name: Trip name
            organizer_id: Caller's user ID

        Returns:
            Tuple of (trip, organizer's participant)

        Raises:
            ValidationError: If the name is blank
        """
        with logfire.span("create_trip", organizer_id=str(organizer_id)):
            name = (name or "").strip()
            if not name:
                raise ValidationError("Trip name is required")
            if len(name) > 200:
                raise ValidationError("Trip name must be at most 200 characters")

            trip = await self.trip_repository.save(
                Trip(id=TripId(uuid4()), name=name, organizer_id=organizer_id)
            )
            participant, _ = await self.participant_service.add_real_participant(
                trip.id, organizer_id
            )
            logfire.info("Trip created", trip_id=str(trip.id))
            return trip, participant

    async def get_trip(self, trip_id: TripId, caller: UserId) -> tuple[Trip, TripRole]:
        """Get a trip together with the caller's role in it."""
        return await self.access_service.require_member(trip_id, caller, "view the trip")
