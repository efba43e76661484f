"""Participant-keyed data migration used when merging participants.

Each entity that references a participant id registers a migrator. Merging
runs every registered migrator, so a new participant-keyed table only has
to provide one to take part in placeholder claims.
"""

from abc import ABC, abstractmethod

from trip.domain.repository import GearRepository, VoteRepository
from trip.domain.value import ParticipantId, TripId


class ParticipantMigrator(ABC):
    """Moves one kind of participant-keyed row between participants."""

    name: str = "participant-keyed rows"

    @abstractmethod
    async def migrate(
        self, trip_id: TripId, source: ParticipantId, target: ParticipantId
    ) -> int:
        """Re-point rows held by ``source`` onto ``target``.

        A row whose equivalent already exists under ``target`` is dropped
        instead of duplicated.

        Args:
            trip_id: Trip both participants belong to
            source: Participant being merged away
            target: Surviving participant

        Returns:
            Number of rows moved
        """
        pass


class VoteMigrator(ParticipantMigrator):
    """Moves date, destination and term votes."""

    name = "votes"

    def __init__(self, vote_repository: VoteRepository) -> None:
        self.vote_repository = vote_repository

    async def migrate(
        self, trip_id: TripId, source: ParticipantId, target: ParticipantId
    ) -> int:
        return await self.vote_repository.reassign_participant(source, target)


class GearAssignmentMigrator(ParticipantMigrator):
    """Moves gear assignments."""

    name = "gear assignments"

    def __init__(self, gear_repository: GearRepository) -> None:
        self.gear_repository = gear_repository

    async def migrate(
        self, trip_id: TripId, source: ParticipantId, target: ParticipantId
    ) -> int:
        return await self.gear_repository.reassign_participant(source, target)
