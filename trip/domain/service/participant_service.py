"""Participant directory domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from trip.config import ParticipantSettings
from trip.domain.error import ForbiddenError, NotFoundError, ValidationError
from trip.domain.model import Participant
from trip.domain.repository import ParticipantRepository, UserRepository
from trip.domain.value import DisplayName, ParticipantId, TripId, UserId

from .access_service import TripAccessService
from .base import Service


class ParticipantService(Service):
    """Domain service for the list of people taking part in a trip."""

    def __init__(
        self,
        participant_repository: ParticipantRepository,
        user_repository: UserRepository,
        access_service: TripAccessService,
        settings: ParticipantSettings,
    ) -> None:
        """Initialize participant service.

        Args:
            participant_repository: Participant repository
            user_repository: User profile repository
            access_service: Trip access service
            settings: Participant naming defaults
        """
        self.participant_repository = participant_repository
        self.user_repository = user_repository
        self.access_service = access_service
        self.settings = settings

    def require_name(self, raw: Optional[str]) -> str:
        """Validate a required display name.

        Raises:
            ValidationError: If the name is blank or too long
        """
        return self._validated(lambda: DisplayName(raw or "")).root

    async def profile_name(self, user_id: UserId) -> str:
        """Display name from the user's profile, or the configured fallback."""
        user = await self.user_repository.find_by_id(user_id)
        if user is not None and user.display_name and user.display_name.strip():
            return user.display_name.strip()
        return self.settings.user_default_name

    async def find_own(self, trip_id: TripId, user_id: UserId) -> Optional[Participant]:
        """Find the caller's own participant in a trip, if any."""
        return await self.participant_repository.find_by_trip_and_user(trip_id, user_id)

    async def get_in_trip(
        self, trip_id: TripId, participant_id: ParticipantId
    ) -> Participant:
        """Get a participant that belongs to the given trip.

        Raises:
            NotFoundError: If the participant does not exist in the trip
        """
        participant = await self.participant_repository.find_by_id(participant_id)
        if participant is None or participant.trip_id != trip_id:
            raise NotFoundError("Participant", str(participant_id))
        return participant

    async def add_real_participant(
        self, trip_id: TripId, user_id: UserId
    ) -> tuple[Participant, bool]:
        """Add a user to a trip, or return their existing participant.

        Joining twice is harmless: the second call returns the same row.

        Args:
            trip_id: Trip ID
            user_id: User joining the trip

        Returns:
            Tuple of (participant, whether it was created by this call)

        Raises:
            NotFoundError: If the trip does not exist
        """
        with logfire.span(
            "add_real_participant", trip_id=str(trip_id), user_id=str(user_id)
        ):
            await self.access_service.get_trip(trip_id)

            existing = await self.find_own(trip_id, user_id)
            if existing is not None:
                return existing, False

            participant = Participant(
                id=ParticipantId(uuid4()),
                trip_id=trip_id,
                user_id=user_id,
                display_name=await self.profile_name(user_id),
                is_placeholder=False,
                created_by=user_id,
            )
            stored, created = await self.participant_repository.add_if_absent(
                participant
            )
            if created:
                logfire.info(
                    "Participant joined", trip_id=str(trip_id), participant_id=str(stored.id)
                )
            return stored, created

    async def add_placeholder(
        self, trip_id: TripId, display_name: Optional[str], created_by: UserId
    ) -> Participant:
        """Create a placeholder participant.

        A blank name falls back to the configured placeholder label.

        Raises:
            NotFoundError: If the trip does not exist
            ForbiddenError: If the caller is neither organizer nor member
            ValidationError: If the name is too long
        """
        with logfire.span("add_placeholder", trip_id=str(trip_id)):
            await self.access_service.require_member(
                trip_id, created_by, "add placeholders"
            )
            name = (display_name or "").strip() or self.settings.placeholder_default_name

            placeholder = Participant(
                id=ParticipantId(uuid4()),
                trip_id=trip_id,
                user_id=None,
                display_name=self.require_name(name),
                is_placeholder=True,
                created_by=created_by,
            )
            saved = await self.participant_repository.save(placeholder)
            logfire.info(
                "Placeholder created", trip_id=str(trip_id), participant_id=str(saved.id)
            )
            return saved

    async def rename_placeholder(
        self,
        trip_id: TripId,
        participant_id: ParticipantId,
        new_name: Optional[str],
        caller: UserId,
    ) -> tuple[Participant, bool]:
        """Rename a placeholder on behalf of the organizer.

        Real participants are left untouched; they rename themselves through
        ``rename_self``.

        Returns:
            Tuple of (participant, whether the name was changed)

        Raises:
            NotFoundError: If the trip or participant does not exist
            ForbiddenError: If the caller is not the organizer
            ValidationError: If the name is blank
        """
        with logfire.span(
            "rename_placeholder", trip_id=str(trip_id), participant_id=str(participant_id)
        ):
            await self.access_service.require_organizer(
                trip_id, caller, "rename participants"
            )
            name = self.require_name(new_name)
            participant = await self.get_in_trip(trip_id, participant_id)

            if not participant.is_placeholder:
                logfire.info(
                    "Rename skipped for real participant",
                    participant_id=str(participant_id),
                )
                return participant, False

            renamed = participant.model_copy(update={"display_name": name})
            return await self.participant_repository.save(renamed), True

    async def rename_self(
        self, trip_id: TripId, new_name: Optional[str], caller: UserId
    ) -> Participant:
        """Rename the caller's own participant.

        Raises:
            NotFoundError: If the trip does not exist
            ForbiddenError: If the caller has no participant in the trip
            ValidationError: If the name is blank
        """
        with logfire.span("rename_self", trip_id=str(trip_id), user_id=str(caller)):
            await self.access_service.get_trip(trip_id)
            name = self.require_name(new_name)

            participant = await self.find_own(trip_id, caller)
            if participant is None:
                raise ForbiddenError("rename themself", str(trip_id), str(caller))

            renamed = participant.model_copy(update={"display_name": name})
            return await self.participant_repository.save(renamed)

    async def remove(
        self, trip_id: TripId, participant_id: ParticipantId, caller: UserId
    ) -> bool:
        """Remove a participant from a trip.

        Removing a participant that does not exist succeeds and returns
        False. Votes and gear assignments go with the participant.

        Raises:
            NotFoundError: If the trip does not exist
            ForbiddenError: If the caller is not the organizer
            ValidationError: If the target is the organizer's own participant
        """
        with logfire.span(
            "remove_participant", trip_id=str(trip_id), participant_id=str(participant_id)
        ):
            trip = await self.access_service.require_organizer(
                trip_id, caller, "remove participants"
            )

            participant = await self.participant_repository.find_by_id(participant_id)
            if participant is None or participant.trip_id != trip_id:
                logfire.info("Participant already absent", participant_id=str(participant_id))
                return False

            if participant.user_id == trip.organizer_id:
                raise ValidationError("The organizer cannot be removed from the trip")

            deleted = await self.participant_repository.delete(participant_id)
            logfire.info("Participant removed", participant_id=str(participant_id))
            return deleted

    async def list_participants(
        self, trip_id: TripId, caller: UserId
    ) -> list[Participant]:
        """List a trip's participants for one of its members."""
        await self.access_service.require_member(trip_id, caller, "list participants")
        return await self.participant_repository.list_by_trip(trip_id)
