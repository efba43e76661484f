"""In-memory proposal repository for testing."""

from datetime import date
from typing import Optional

from sqlalchemy.exc import IntegrityError

from trip.domain.model import Proposal
from trip.domain.repository import ProposalRepository
from trip.domain.value import ProposalId, ProposalKind, TripId

from .store import InMemoryStore


class InMemoryProposalRepository(ProposalRepository):
    """In-memory implementation of ProposalRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, proposal_id: ProposalId) -> Optional[Proposal]:
        return self.store.proposals.get(proposal_id)

    async def find_date_option(self, trip_id: TripId, day: date) -> Optional[Proposal]:
        for proposal in self.store.proposals.values():
            if (
                proposal.trip_id == trip_id
                and proposal.kind == ProposalKind.DATE
                and proposal.starts_on == day
            ):
                return proposal
        return None

    async def list_by_trip(self, trip_id: TripId, kind: ProposalKind) -> list[Proposal]:
        proposals = [
            p
            for p in self.store.proposals.values()
            if p.trip_id == trip_id and p.kind == kind
        ]
        return sorted(proposals, key=lambda p: (p.starts_on or date.min, p.created_at))

    async def save(self, proposal: Proposal) -> Proposal:
        """Save a proposal.

        Raises:
            IntegrityError: If it would make a second chosen proposal of its kind
        """
        if proposal.is_chosen:
            for other in self.store.proposals.values():
                if (
                    other.id != proposal.id
                    and other.trip_id == proposal.trip_id
                    and other.kind == proposal.kind
                    and other.is_chosen
                ):
                    raise IntegrityError("Second chosen proposal", None, Exception())
        self.store.proposals[proposal.id] = proposal
        return proposal

    async def add_date_option(self, proposal: Proposal) -> tuple[Proposal, bool]:
        existing = await self.find_date_option(proposal.trip_id, proposal.starts_on)
        if existing is not None:
            return existing, False
        self.store.proposals[proposal.id] = proposal
        return proposal, True

    async def set_chosen(
        self, trip_id: TripId, kind: ProposalKind, proposal_id: ProposalId
    ) -> int:
        updated = 0
        for proposal in list(self.store.proposals.values()):
            if proposal.trip_id != trip_id or proposal.kind != kind:
                continue
            should_be_chosen = proposal.id == proposal_id
            if proposal.is_chosen != should_be_chosen:
                self.store.proposals[proposal.id] = proposal.model_copy(
                    update={"is_chosen": should_be_chosen}
                )
                updated += 1
        return updated
