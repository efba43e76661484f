"""Unit tests for ChooseProposalUseCase."""

import asyncio

import pytest

from trip.application.usecase.proposal import ListProposalsUseCase, ProposeUseCase
from trip.application.usecase.proposal.list_proposals import ListProposalsRequest
from trip.application.usecase.proposal.propose import ProposeRequest
from trip.application.usecase.selection import ChooseProposalUseCase
from trip.application.usecase.selection.choose_proposal import ChooseProposalRequest
from trip.domain.value import ErrorKind, ProposalKind
from tests.conftest import make_member, make_trip
from tests.harness import create_app_env_fixture, create_env_fixture

# Unit test fixtures - in-memory store, no database needed
unit_env = create_env_fixture()
app_env = create_app_env_fixture()

TRANSPORTATION = ProposalKind.TRANSPORTATION


async def _propose(env, trip, title):
    propose = await env.get(ProposeUseCase)
    response = await propose.execute(
        ProposeRequest(
            trip_id=trip.id, caller_id=trip.organizer_id, kind=TRANSPORTATION, title=title
        )
    )
    return response.proposal


async def _chosen(env, trip):
    list_proposals = await env.get(ListProposalsUseCase)
    response = await list_proposals.execute(
        ListProposalsRequest(trip_id=trip.id, caller_id=trip.organizer_id, kind=TRANSPORTATION)
    )
    return [p.proposal_id for p in response.proposals if p.is_chosen]


class TestChooseProposal:
    """Tests for choosing a proposal."""

    @pytest.mark.asyncio
    async def test_choice_replaces_previous(self, unit_env):
        # Arrange
        trip, _ = await make_trip(unit_env)
        train = await _propose(unit_env, trip, "Train")
        car = await _propose(unit_env, trip, "Car")
        choose = await unit_env.get(ChooseProposalUseCase)

        # Act
        await choose.execute(
            ChooseProposalRequest(
                trip_id=trip.id,
                caller_id=trip.organizer_id,
                kind=TRANSPORTATION,
                proposal_id=train.proposal_id,
            )
        )
        response = await choose.execute(
            ChooseProposalRequest(
                trip_id=trip.id,
                caller_id=trip.organizer_id,
                kind=TRANSPORTATION,
                proposal_id=car.proposal_id,
            )
        )

        # Assert
        assert response.success is True
        assert response.proposal.is_chosen is True
        assert await _chosen(unit_env, trip) == [car.proposal_id]

    @pytest.mark.asyncio
    async def test_member_is_forbidden(self, unit_env):
        trip, _ = await make_trip(unit_env)
        member_id, _ = await make_member(unit_env, trip.id)
        train = await _propose(unit_env, trip, "Train")
        choose = await unit_env.get(ChooseProposalUseCase)

        response = await choose.execute(
            ChooseProposalRequest(
                trip_id=trip.id,
                caller_id=member_id,
                kind=TRANSPORTATION,
                proposal_id=train.proposal_id,
            )
        )

        assert response.error == ErrorKind.FORBIDDEN
        assert await _chosen(unit_env, trip) == []


class TestConcurrentChoose:
    """Concurrent choices for the same kind."""

    @pytest.mark.asyncio
    async def test_one_choice_survives(self, app_env):
        # Arrange
        async with app_env() as setup:
            trip, _ = await make_trip(setup)
            options = [await _propose(setup, trip, title) for title in ("Bus", "Bike")]

        # Act
        async with app_env() as first, app_env() as second:
            chooses = [await env.get(ChooseProposalUseCase) for env in (first, second)]
            responses = await asyncio.gather(
                *(
                    choose.execute(
                        ChooseProposalRequest(
                            trip_id=trip.id,
                            caller_id=trip.organizer_id,
                            kind=TRANSPORTATION,
                            proposal_id=option.proposal_id,
                        )
                    )
                    for choose, option in zip(chooses, options)
                )
            )

        # Assert
        assert all(r.success for r in responses)
        async with app_env() as check:
            chosen = await _chosen(check, trip)
        assert len(chosen) == 1
        assert chosen[0] in {o.proposal_id for o in options}
