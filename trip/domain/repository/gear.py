"""Gear repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from trip.domain.model import GearAssignment, GearItem
from trip.domain.value import GearItemId, ParticipantId


class GearRepository(ABC):
    """Repository for gear items and their participant assignments."""

    @abstractmethod
    async def find_item(self, gear_id: GearItemId) -> Optional[GearItem]:
        pass

    @abstractmethod
    async def save_item(self, item: GearItem) -> GearItem:
        pass

    @abstractmethod
    async def find_assignment(
        self, gear_id: GearItemId, participant_id: ParticipantId
    ) -> Optional[GearAssignment]:
        pass

    @abstractmethod
    async def find_assignments_by_participant(
        self, participant_id: ParticipantId
    ) -> list[GearAssignment]:
        pass

    @abstractmethod
    async def save_assignment(self, assignment: GearAssignment) -> GearAssignment:
        """Create or update the assignment for (gear item, participant).

        An existing row for the pair keeps its id and takes the new quantity,
        so two concurrent assigns both succeed.

        Returns:
            The stored assignment
        """
        pass

    @abstractmethod
    async def delete_assignment(
        self, gear_id: GearItemId, participant_id: ParticipantId
    ) -> bool:
        pass

    @abstractmethod
    async def reassign_participant(
        self, source: ParticipantId, target: ParticipantId
    ) -> int:
        """Move assignments from one participant to another.

        Assignments for gear the target already holds are dropped.

        Returns:
            Number of assignments moved
        """
        pass
