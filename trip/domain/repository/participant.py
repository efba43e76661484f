"""Participant repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from trip.domain.model import Participant
from trip.domain.value import ParticipantId, TripId, UserId


class ParticipantRepository(ABC):
    """Repository for Participant entity.

    Implementations must enforce one participant per (trip, user) at the
    storage level.
    """

    @abstractmethod
    async def find_by_id(self, participant_id: ParticipantId) -> Optional[Participant]:
        """Find a participant by ID.

        Args:
            participant_id: The participant's unique identifier

        Returns:
            The participant if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_trip_and_user(
        self, trip_id: TripId, user_id: UserId
    ) -> Optional[Participant]:
        """Find the participant linked to a user within a trip.

        Args:
            trip_id: The trip's ID
            user_id: The linked user's ID

        Returns:
            The participant if the user belongs to the trip, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_trip(self, trip_id: TripId) -> list[Participant]:
        """List every participant of a trip, ordered by display name."""
        pass

    @abstractmethod
    async def add_if_absent(self, participant: Participant) -> tuple[Participant, bool]:
        """Insert a linked participant unless one exists for its (trip, user).

        Losing a concurrent insert race is not an error: the row that won is
        returned instead.

        Args:
            participant: The participant to insert

        Returns:
            Tuple of (stored participant, whether it was created by this call)
        """
        pass

    @abstractmethod
    async def lock_placeholder(
        self, participant_id: ParticipantId
    ) -> Optional[Participant]:
        """Find a participant and hold a row lock on it until the transaction ends.

        A second claimant blocks here until the first one commits, then sees
        the converted row.
        """
        pass

    @abstractmethod
    async def claim_placeholder(
        self,
        participant_id: ParticipantId,
        user_id: UserId,
        display_name: str,
        claimed_at: datetime,
    ) -> Optional[Participant]:
        """Link an unclaimed placeholder to a user, keeping its id.

        The update only applies while the row is still a placeholder with no
        user, so of two racing claims exactly one converts it.

        Returns:
            The converted participant, or None if the row is missing or
            already claimed

        Raises:
            IntegrityError: If the user already has a participant in the trip.
                The rest of the transaction stays usable.
        """
        pass

    @abstractmethod
    async def save(self, participant: Participant) -> Participant:
        """Save a participant (create or update).

        Raises:
            IntegrityError: If another participant is linked to the same
                user in the same trip
        """
        pass

    @abstractmethod
    async def delete(self, participant_id: ParticipantId) -> bool:
        """Delete a participant.

        Votes and gear assignments go with it. Claim codes issued for it are
        kept, revoked if still open, with their participant reference cleared.

        Returns:
            True if a row was deleted, False if none existed
        """
        pass
