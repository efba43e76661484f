"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from trip.domain.model import User
from trip.domain.repository import UserRepository
from trip.domain.value import UserId
from trip.persistence.mappers import row_to_user, user_to_dict
from trip.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def save(self, user: User) -> User:
        """Upsert a profile mirrored from the authentication collaborator."""
        user_dict = user_to_dict(user)
        stmt = (
            insert(users_table)
            .values(**user_dict)
            .on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={
                    "display_name": user_dict["display_name"],
                    "email": user_dict["email"],
                },
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user
