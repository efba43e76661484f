"""Unit tests for ProposalService."""

from datetime import date

import pytest

from trip.domain.error import ForbiddenError, ValidationError
from trip.domain.service import ProposalService
from trip.domain.value import ProposalKind
from tests.conftest import make_member, make_trip, new_user_id
from tests.harness import create_env_fixture

# Unit test fixture - in-memory store, no database needed
unit_env = create_env_fixture()


class TestProposeDate:
    """Tests for propose_date."""

    @pytest.mark.asyncio
    async def test_one_option_per_day(self, unit_env):
        service = await unit_env.get(ProposalService)
        trip, _ = await make_trip(unit_env)
        member_id, _ = await make_member(unit_env, trip.id)

        first, created = await service.propose_date(trip.id, date(2026, 8, 1), member_id)
        again, created_again = await service.propose_date(
            trip.id, date(2026, 8, 1), trip.organizer_id
        )

        assert created is True
        assert created_again is False
        assert again.id == first.id

    @pytest.mark.asyncio
    async def test_date_kind_without_date(self, unit_env):
        service = await unit_env.get(ProposalService)
        trip, _ = await make_trip(unit_env)

        with pytest.raises(ValidationError):
            await service.propose(trip.id, ProposalKind.DATE, trip.organizer_id)


class TestPropose:
    """Tests for propose."""

    @pytest.mark.asyncio
    async def test_destination_needs_title(self, unit_env):
        service = await unit_env.get(ProposalService)
        trip, _ = await make_trip(unit_env)

        with pytest.raises(ValidationError):
            await service.propose(
                trip.id, ProposalKind.DESTINATION, trip.organizer_id, title="   "
            )

    @pytest.mark.asyncio
    async def test_term_dates_must_be_ordered(self, unit_env):
        service = await unit_env.get(ProposalService)
        trip, _ = await make_trip(unit_env)

        with pytest.raises(ValidationError):
            await service.propose(
                trip.id,
                ProposalKind.TERM,
                trip.organizer_id,
                starts_on=date(2026, 8, 5),
                ends_on=date(2026, 8, 1),
            )

        term = await service.propose(
            trip.id,
            ProposalKind.TERM,
            trip.organizer_id,
            starts_on=date(2026, 8, 1),
            ends_on=date(2026, 8, 5),
        )
        assert term.is_chosen is False

    @pytest.mark.asyncio
    async def test_strangers_cannot_propose(self, unit_env):
        service = await unit_env.get(ProposalService)
        trip, _ = await make_trip(unit_env)

        with pytest.raises(ForbiddenError):
            await service.propose(
                trip.id, ProposalKind.TRANSPORTATION, new_user_id(), title="Train"
            )

    @pytest.mark.asyncio
    async def test_list_by_kind(self, unit_env):
        service = await unit_env.get(ProposalService)
        trip, _ = await make_trip(unit_env)
        lake = await service.propose(
            trip.id, ProposalKind.DESTINATION, trip.organizer_id, title="Lake"
        )
        await service.propose(
            trip.id, ProposalKind.TRANSPORTATION, trip.organizer_id, title="Train"
        )

        destinations = await service.list_proposals(
            trip.id, ProposalKind.DESTINATION, trip.organizer_id
        )

        assert [p.id for p in destinations] == [lake.id]
