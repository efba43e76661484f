"""Integration tests for PostgresParticipantRepository.

Tests using ``integration_env`` commit nothing. The racing tests need two
sessions that see the same rows, so they commit their setup and delete it
again afterwards.
"""

import asyncio
from datetime import timedelta
from uuid import uuid4

import pytest
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from trip.application.usecase.claim import ClaimPlaceholderUseCase, IssueClaimCodeUseCase
from trip.application.usecase.claim.claim_placeholder import ClaimPlaceholderRequest
from trip.application.usecase.claim.issue_claim_code import IssueClaimCodeRequest
from trip.domain.model import Participant, PlaceholderClaim
from trip.domain.model.common import utcnow
from trip.domain.repository import (
    ParticipantRepository,
    PlaceholderClaimRepository,
    UnitOfWork,
)
from trip.domain.value import ClaimId, ErrorKind, ParticipantId
from trip.persistence.tables import trips_table, users_table
from trip.util.codes import generate_code, hash_code
from tests.conftest import make_member, make_placeholder, make_trip, make_user, new_user_id
from tests.harness import create_app_env_fixture, create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixtures - real PostgreSQL, assumes migrations have run
integration_env = create_env_fixture(unmock={"persistence"})
integration_app_env = create_app_env_fixture(unmock={"persistence"})


def _participant(trip, user_id, display_name="Max"):
    return Participant(
        id=ParticipantId(uuid4()),
        trip_id=trip.id,
        user_id=user_id,
        display_name=display_name,
        is_placeholder=False,
        created_by=user_id,
    )


class TestParticipantRepositoryIntegration:
    """Integration tests for the conflict-aware participant writes."""

    @pytest.mark.asyncio
    async def test_add_if_absent_returns_existing_row(self, integration_env):
        # Arrange
        repo = await integration_env.get(ParticipantRepository)
        trip, _ = await make_trip(integration_env)
        user_id = new_user_id()

        # Act
        first, first_created = await repo.add_if_absent(_participant(trip, user_id))
        second, second_created = await repo.add_if_absent(
            _participant(trip, user_id, "Other name")
        )

        # Assert
        assert first_created is True
        assert second_created is False
        assert second.id == first.id
        assert second.display_name == "Max"
        rows = [p for p in await repo.list_by_trip(trip.id) if p.user_id == user_id]
        assert len(rows) == 1

    @pytest.mark.asyncio
    async def test_claim_placeholder_converts_once(self, integration_env):
        # Arrange
        repo = await integration_env.get(ParticipantRepository)
        trip, _ = await make_trip(integration_env)
        placeholder = await make_placeholder(integration_env, trip)
        first_user, second_user = new_user_id(), new_user_id()
        now = utcnow()

        # Act
        first = await repo.claim_placeholder(placeholder.id, first_user, "Jo", now)
        second = await repo.claim_placeholder(placeholder.id, second_user, "Sam", now)

        # Assert
        assert first.id == placeholder.id
        assert first.user_id == first_user
        assert first.is_placeholder is False
        assert first.claimed_at is not None
        assert second is None
        assert (await repo.find_by_id(placeholder.id)).user_id == first_user

    @pytest.mark.asyncio
    async def test_claim_conflict_leaves_transaction_usable(self, integration_env):
        """A (trip, user) conflict only undoes the conversion itself."""
        # Arrange
        repo = await integration_env.get(ParticipantRepository)
        trip, _ = await make_trip(integration_env)
        member_id, member = await make_member(integration_env, trip.id)
        placeholder = await make_placeholder(integration_env, trip)

        # Act
        with pytest.raises(IntegrityError):
            await repo.claim_placeholder(placeholder.id, member_id, "Max", utcnow())

        # Assert
        assert (await repo.find_by_id(placeholder.id)).is_placeholder is True
        assert (await repo.find_by_id(member.id)).user_id == member_id

    @pytest.mark.asyncio
    async def test_delete_revokes_claims_and_keeps_them(self, integration_env):
        # Arrange
        repo = await integration_env.get(ParticipantRepository)
        claim_repo = await integration_env.get(PlaceholderClaimRepository)
        trip, _ = await make_trip(integration_env)
        placeholder = await make_placeholder(integration_env, trip)
        claim = await claim_repo.save(
            PlaceholderClaim(
                id=ClaimId(uuid4()),
                trip_id=trip.id,
                participant_id=placeholder.id,
                code_hash=hash_code(generate_code()),
                expires_at=utcnow() + timedelta(hours=1),
                created_by=trip.organizer_id,
            )
        )

        # Act
        deleted = await repo.delete(placeholder.id)

        # Assert
        assert deleted is True
        stored = await claim_repo.find_by_id(claim.id)
        assert stored is not None
        assert stored.revoked_at is not None
        assert stored.participant_id is None


class TestConcurrentClaimIntegration:
    """Two redemptions for one placeholder racing on separate connections."""

    @pytest.mark.asyncio
    async def test_racing_codes_claim_placeholder_once(self, integration_app_env):
        # Arrange
        async with integration_app_env() as setup:
            async with (await setup.get(UnitOfWork)).transaction():
                trip, _ = await make_trip(setup)
                placeholder = await make_placeholder(setup, trip)
                member_id, member = await make_member(setup, trip.id)
                newcomer = await make_user(setup, "Jo")
            issue = await setup.get(IssueClaimCodeUseCase)
            codes = []
            for _ in range(2):
                issued = await issue.execute(
                    IssueClaimCodeRequest(
                        trip_id=trip.id,
                        caller_id=trip.organizer_id,
                        participant_id=placeholder.id,
                    )
                )
                codes.append(issued.code)
        callers = [newcomer, member_id]

        try:
            # Act
            async with integration_app_env() as first, integration_app_env() as second:
                claims = [await env.get(ClaimPlaceholderUseCase) for env in (first, second)]
                responses = await asyncio.gather(
                    *(
                        claim.execute(ClaimPlaceholderRequest(code=code, caller_id=caller))
                        for claim, code, caller in zip(claims, codes, callers)
                    )
                )

            # Assert
            assert sorted(r.success for r in responses) == [False, True]
            lost = next(r for r in responses if not r.success)
            assert lost.error == ErrorKind.INVALID_OR_EXPIRED_CODE
            winner = callers[[r.success for r in responses].index(True)]
            async with integration_app_env() as check:
                repo = await check.get(ParticipantRepository)
                stored = await repo.find_by_id(placeholder.id)
                assert stored.user_id == winner
                if winner == newcomer:
                    # The member's merge was rolled back with the lost claim
                    assert (await repo.find_by_id(member.id)).user_id == member_id
                else:
                    assert await repo.find_by_id(member.id) is None
        finally:
            async with integration_app_env() as cleanup:
                session = await cleanup.get(AsyncSession)
                await session.execute(delete(trips_table).where(trips_table.c.id == trip.id))
                await session.execute(
                    delete(users_table).where(
                        users_table.c.id.in_([trip.organizer_id, member_id, newcomer])
                    )
                )
                await session.commit()
