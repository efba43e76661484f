"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from trip.domain.model import User
from trip.domain.value import UserId


class UserRepository(ABC):
    """Read access to user profiles owned by the authentication collaborator."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        pass
