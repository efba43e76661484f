"""Proposal repository interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from trip.domain.model import Proposal
from trip.domain.value import ProposalId, ProposalKind, TripId


class ProposalRepository(ABC):
    """Repository for Proposal entity across all proposal kinds."""

    @abstractmethod
    async def find_by_id(self, proposal_id: ProposalId) -> Optional[Proposal]:
        pass

    @abstractmethod
    async def find_date_option(self, trip_id: TripId, day: date) -> Optional[Proposal]:
        """Find a trip's date option for a calendar day."""
        pass

    @abstractmethod
    async def list_by_trip(self, trip_id: TripId, kind: ProposalKind) -> list[Proposal]:
        pass

    @abstractmethod
    async def save(self, proposal: Proposal) -> Proposal:
        pass

    @abstractmethod
    async def set_chosen(
        self, trip_id: TripId, kind: ProposalKind, proposal_id: ProposalId
    ) -> int:
        """Mark one proposal chosen and every sibling of the same kind unchosen.

        Must be a single atomic write so no reader ever sees zero or two
        chosen proposals.

        Args:
            trip_id: Trip owning the proposals
            kind: Proposal kind to update
            proposal_id: Proposal to mark as chosen

        Returns:
            Number of proposals updated
        """
        pass

    @abstractmethod
    async def add_date_option(self, proposal: Proposal) -> tuple[Proposal, bool]:
        """Insert a date option unless the trip already has one for that day.

        Returns:
            Tuple of (stored date option, whether it was created by this call)
        """
        pass
