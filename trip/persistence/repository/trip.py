"""PostgreSQL implementation of Trip repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from trip.domain.model import Trip
from trip.domain.repository import TripRepository
from trip.domain.value import TripId
from trip.persistence.mappers import row_to_trip, trip_to_dict
from trip.persistence.tables import trips_table


class PostgresTripRepository(TripRepository):
    """PostgreSQL implementation of TripRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, trip_id: TripId) -> Optional[Trip]:
        stmt = select(trips_table).where(trips_table.c.id == trip_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_trip(row._asdict()) if row else None

    async def save(self, trip: Trip) -> Trip:
        trip_dict = trip_to_dict(trip)
        if await self.find_by_id(trip.id):
            stmt = (
                update(trips_table)
                .where(trips_table.c.id == trip.id)
                .values(**trip_dict)
            )
        else:
            stmt = insert(trips_table).values(**trip_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return trip
