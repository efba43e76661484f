"""Unit tests for the in-memory unit of work."""

import asyncio
from uuid import uuid4

import pytest

from trip.domain.model import Trip
from trip.domain.value import TripId, UserId
from trip.persistence.repository.inmemory import (
    InMemoryStore,
    InMemoryTripRepository,
    InMemoryUnitOfWork,
)


def _trip(name: str = "Lake weekend") -> Trip:
    return Trip(id=TripId(uuid4()), name=name, organizer_id=UserId(uuid4()))


class TestInMemoryUnitOfWork:
    """Tests for InMemoryUnitOfWork."""

    @pytest.mark.asyncio
    async def test_commit_keeps_writes(self):
        store = InMemoryStore()
        repo = InMemoryTripRepository(store)
        trip = _trip()

        async with InMemoryUnitOfWork(store).transaction():
            await repo.save(trip)

        assert await repo.find_by_id(trip.id) == trip

    @pytest.mark.asyncio
    async def test_exception_restores_snapshot(self):
        # Arrange
        store = InMemoryStore()
        repo = InMemoryTripRepository(store)
        kept = _trip("Kept")
        await repo.save(kept)
        discarded = _trip("Discarded")

        # Act
        with pytest.raises(RuntimeError):
            async with InMemoryUnitOfWork(store).transaction():
                await repo.save(discarded)
                await repo.save(kept.model_copy(update={"name": "Renamed"}))
                raise RuntimeError("boom")

        # Assert
        assert await repo.find_by_id(discarded.id) is None
        assert (await repo.find_by_id(kept.id)).name == "Kept"

    @pytest.mark.asyncio
    async def test_transactions_do_not_interleave(self):
        store = InMemoryStore()
        events: list[str] = []

        async def work(label: str) -> None:
            async with InMemoryUnitOfWork(store).transaction():
                events.append(f"{label}-start")
                await asyncio.sleep(0.01)
                events.append(f"{label}-end")

        await asyncio.gather(work("a"), work("b"))

        assert events in (
            ["a-start", "a-end", "b-start", "b-end"],
            ["b-start", "b-end", "a-start", "a-end"],
        )
