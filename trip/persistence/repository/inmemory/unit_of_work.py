"""In-memory unit of work for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from trip.domain.repository import UnitOfWork

from .store import InMemoryStore


class InMemoryUnitOfWork(UnitOfWork):
    """Serialised transactions over an InMemoryStore.

    Holding the store lock for the whole transaction behaves like a
    serialisable database: concurrent operations run one after another.
    A failed transaction restores the snapshot taken when it began.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with self.store.lock:
            snapshot = self.store.snapshot()
            try:
                yield
            except BaseException:
                self.store.restore(snapshot)
                raise
