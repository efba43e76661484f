"""Gear checklist domain service."""

from uuid import uuid4

import logfire

from trip.domain.error import ForbiddenError, NotFoundError, ValidationError
from trip.domain.model import GearAssignment, GearItem
from trip.domain.repository import GearRepository
from trip.domain.value import (
    GearAssignmentId,
    GearItemId,
    ParticipantId,
    TripId,
    TripRole,
    UserId,
)

from .access_service import TripAccessService
from .base import Service
from .participant_service import ParticipantService


class GearService(Service):
    """Domain service for gear items and who brings them."""

    def __init__(
        self,
        gear_repository: GearRepository,
        participant_service: ParticipantService,
        access_service: TripAccessService,
    ) -> None:
        self.gear_repository = gear_repository
        self.participant_service = participant_service
        self.access_service = access_service

    async def add_item(self, trip_id: TripId, name: str, caller: UserId) -> GearItem:
        """Add an item to the trip's gear checklist."""
        await self.access_service.require_member(trip_id, caller, "add gear")
        name = (name or "").strip()
        if not name:
            raise ValidationError("Gear name is required")
        return await self.gear_repository.save_item(
            GearItem(id=GearItemId(uuid4()), trip_id=trip_id, name=name)
        )

    async def assign(
        self,
        trip_id: TripId,
        gear_id: GearItemId,
        participant_id: ParticipantId,
        quantity: int,
        caller: UserId,
    ) -> GearAssignment:
        """Assign gear to a participant, or update the quantity they bring.

        The organizer may assign anyone. Members may assign themselves and
        placeholders.

        Raises:
            NotFoundError: If the trip, gear item or participant does not exist
            ForbiddenError: If the caller may not assign this participant
            ValidationError: If quantity is below 1
        """
        with logfire.span(
            "assign_gear", trip_id=str(trip_id), gear_id=str(gear_id)
        ):
            if quantity < 1:
                raise ValidationError("Quantity must be at least 1")

            trip, role = await self.access_service.require_member(
                trip_id, caller, "assign gear"
            )
            await self._get_item(trip_id, gear_id)
            target = await self.participant_service.get_in_trip(trip_id, participant_id)

            if role != TripRole.ORGANIZER and not (
                target.is_placeholder or target.user_id == caller
            ):
                raise ForbiddenError("assign gear to others", str(trip.id), str(caller))

            assignment = GearAssignment(
                id=GearAssignmentId(uuid4()),
                gear_id=gear_id,
                participant_id=participant_id,
                quantity=quantity,
            )
            return await self.gear_repository.save_assignment(assignment)

    async def unassign(
        self,
        trip_id: TripId,
        gear_id: GearItemId,
        participant_id: ParticipantId,
        caller: UserId,
    ) -> bool:
        """Remove an assignment. Returns False if there was none."""
        _, role = await self.access_service.require_member(
            trip_id, caller, "unassign gear"
        )
        await self._get_item(trip_id, gear_id)
        target = await self.participant_service.get_in_trip(trip_id, participant_id)
        if role != TripRole.ORGANIZER and not (
            target.is_placeholder or target.user_id == caller
        ):
            raise ForbiddenError("unassign gear from others", str(trip_id), str(caller))
        return await self.gear_repository.delete_assignment(gear_id, participant_id)

    async def _get_item(self, trip_id: TripId, gear_id: GearItemId) -> GearItem:
        item = await self.gear_repository.find_item(gear_id)
        if item is None or item.trip_id != trip_id:
            raise NotFoundError("Gear item", str(gear_id))
        return item
