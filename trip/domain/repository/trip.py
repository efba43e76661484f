"""Trip repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from trip.domain.model import Trip
from trip.domain.value import TripId


class TripRepository(ABC):
    """Repository for Trip entity."""

    @abstractmethod
    async def find_by_id(self, trip_id: TripId) -> Optional[Trip]:
        """Find a trip by ID.

        Args:
            trip_id: The trip's unique identifier

        Returns:
            The trip if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, trip: Trip) -> Trip:
        """Save a trip (create or update)."""
        pass
