"""PostgreSQL implementation of Gear repository."""

from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from trip.domain.model import GearAssignment, GearItem
from trip.domain.repository import GearRepository
from trip.domain.value import GearItemId, ParticipantId
from trip.persistence.mappers import (
    gear_assignment_to_dict,
    gear_item_to_dict,
    row_to_gear_assignment,
    row_to_gear_item,
)
from trip.persistence.tables import gear_assignments_table, gear_items_table


class PostgresGearRepository(GearRepository):
    """PostgreSQL implementation of GearRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_item(self, gear_id: GearItemId) -> Optional[GearItem]:
        stmt = select(gear_items_table).where(gear_items_table.c.id == gear_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_gear_item(row._asdict()) if row else None

    async def save_item(self, item: GearItem) -> GearItem:
        item_dict = gear_item_to_dict(item)
        if await self.find_item(item.id):
            stmt = (
                update(gear_items_table)
                .where(gear_items_table.c.id == item.id)
                .values(**item_dict)
            )
        else:
            stmt = insert(gear_items_table).values(**item_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return item

    async def find_assignment(
        self, gear_id: GearItemId, participant_id: ParticipantId
    ) -> Optional[GearAssignment]:
        stmt = select(gear_assignments_table).where(
            gear_assignments_table.c.gear_id == gear_id,
            gear_assignments_table.c.participant_id == participant_id,
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_gear_assignment(row._asdict()) if row else None

    async def find_assignments_by_participant(
        self, participant_id: ParticipantId
    ) -> list[GearAssignment]:
        stmt = select(gear_assignments_table).where(
            gear_assignments_table.c.participant_id == participant_id
        )
        result = await self.session.execute(stmt)
        return [row_to_gear_assignment(row._asdict()) for row in result.fetchall()]

    async def save_assignment(self, assignment: GearAssignment) -> GearAssignment:
        """Upsert on (gear, participant); a concurrent assign updates the quantity."""
        t = gear_assignments_table
        upsert = pg_insert(t).values(**gear_assignment_to_dict(assignment))
        stmt = upsert.on_conflict_do_update(
            constraint="uq_gear_assignments_gear_participant",
            set_={"quantity": upsert.excluded.quantity},
        ).returning(t)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_gear_assignment(row._asdict())

    async def delete_assignment(
        self, gear_id: GearItemId, participant_id: ParticipantId
    ) -> bool:
        stmt = delete(gear_assignments_table).where(
            gear_assignments_table.c.gear_id == gear_id,
            gear_assignments_table.c.participant_id == participant_id,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def reassign_participant(
        self, source: ParticipantId, target: ParticipantId
    ) -> int:
        t = gear_assignments_table
        target_gear = select(t.c.gear_id).where(t.c.participant_id == target)
        await self.session.execute(
            delete(t).where(t.c.participant_id == source, t.c.gear_id.in_(target_gear))
        )
        result = await self.session.execute(
            update(t).where(t.c.participant_id == source).values(participant_id=target)
        )
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
