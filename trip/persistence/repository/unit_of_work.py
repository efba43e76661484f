"""SQLAlchemy implementation of the unit of work."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from trip.domain.repository import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Commits or rolls back the request-scoped session.

    Repositories share the same session, so everything they wrote since the
    previous commit belongs to the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        try:
            yield
        except BaseException as e:
            # Cancellation included: nothing half-done may be committed
            logfire.warn("Transaction rolled back", error=type(e).__name__)
            await self.session.rollback()
            raise
        else:
            await self.session.commit()
