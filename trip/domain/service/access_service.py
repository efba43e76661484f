"""Trip access domain service.

Every operation asks this service what the caller is to the trip rather
than comparing organizer ids itself.
"""

from typing import Optional

import logfire

from trip.domain.error import ForbiddenError, NotFoundError
from trip.domain.model import Trip
from trip.domain.repository import ParticipantRepository, TripRepository
from trip.domain.value import TripId, TripRole, UserId

from .base import Service


class TripAccessService(Service):
    """Resolves the caller's role in a trip and enforces it."""

    def __init__(
        self,
        trip_repository: TripRepository,
        participant_repository: ParticipantRepository,
    ) -> None:
        """Initialize access service.

        Args:
            trip_repository: Trip repository
            participant_repository: Participant repository
        """
        self.trip_repository = trip_repository
        self.participant_repository = participant_repository

    async def get_trip(self, trip_id: TripId) -> Trip:
        """Get a trip by ID.

        Raises:
            NotFoundError: If the trip does not exist
        """
        trip = await self.trip_repository.find_by_id(trip_id)
        if trip is None:
            raise NotFoundError("Trip", str(trip_id))
        return trip

    async def resolve_role(self, trip: Trip, user_id: Optional[UserId]) -> TripRole:
        """Return the caller's role in the trip.

        The organizer is always ORGANIZER, even without a participant row.
        Any other user linked to a participant is a MEMBER.
        """
        if user_id is None:
            return TripRole.NONE
        if trip.organizer_id == user_id:
            return TripRole.ORGANIZER
        participant = await self.participant_repository.find_by_trip_and_user(
            trip.id, user_id
        )
        return TripRole.MEMBER if participant is not None else TripRole.NONE

    async def require_organizer(
        self, trip_id: TripId, user_id: UserId, action: str
    ) -> Trip:
        """Load a trip and require the caller to organize it.

        Args:
            trip_id: Trip ID
            user_id: Caller's user ID
            action: Short description of the attempted action, for errors

        Returns:
            The trip

        Raises:
            NotFoundError: If the trip does not exist
            ForbiddenError: If the caller is not the organizer
        """
        trip = await self.get_trip(trip_id)
        if await self.resolve_role(trip, user_id) != TripRole.ORGANIZER:
            logfire.warn(
                "Organizer-only action refused",
                action=action,
                trip_id=str(trip_id),
                user_id=str(user_id),
            )
            raise ForbiddenError(action, str(trip_id), str(user_id))
        return trip

    async def require_member(
        self, trip_id: TripId, user_id: UserId, action: str
    ) -> tuple[Trip, TripRole]:
        """Load a trip and require the caller to be its organizer or a member.

        Returns:
            Tuple of (trip, caller's role)

        Raises:
            NotFoundError: If the trip does not exist
            ForbiddenError: If the caller has no relationship to the trip
        """
        trip = await self.get_trip(trip_id)
        role = await self.resolve_role(trip, user_id)
        if not role.is_member:
            logfire.warn(
                "Member-only action refused",
                action=action,
                trip_id=str(trip_id),
                user_id=str(user_id),
            )
            raise ForbiddenError(action, str(trip_id), str(user_id))
        return trip, role
