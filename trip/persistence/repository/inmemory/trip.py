"""In-memory trip and user repositories for testing."""

from typing import Optional

from trip.domain.model import Trip, User
from trip.domain.repository import TripRepository, UserRepository
from trip.domain.value import TripId, UserId

from .store import InMemoryStore


class InMemoryTripRepository(TripRepository):
    """In-memory implementation of TripRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, trip_id: TripId) -> Optional[Trip]:
        return self.store.trips.get(trip_id)

    async def save(self, trip: Trip) -> Trip:
        self.store.trips[trip.id] = trip
        return trip


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self.store.users.get(user_id)

    async def save(self, user: User) -> User:
        self.store.users[user.id] = user
        return user
