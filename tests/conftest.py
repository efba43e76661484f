"""Test configuration and helpers."""

from typing import Optional
from uuid import uuid4

from dishka import AsyncContainer

from trip.domain.model import Participant, Trip, User
from trip.domain.repository import UserRepository
from trip.domain.service import ParticipantService, TripService
from trip.domain.value import TripId, UserId


def new_user_id() -> UserId:
    return UserId(uuid4())


async def make_user(
    env: AsyncContainer, display_name: Optional[str] = None
) -> UserId:
    """Store a user profile and return its ID."""
    user_repo = await env.get(UserRepository)
    user = await user_repo.save(User(id=new_user_id(), display_name=display_name))
    return user.id


async def make_trip(
    env: AsyncContainer, organizer: Optional[UserId] = None, name: str = "Lake weekend"
) -> tuple[Trip, Participant]:
    """Create a trip through the trip service.

    Returns:
        Tuple of (trip, organizer's participant)
    """
    trip_service = await env.get(TripService)
    organizer = organizer or await make_user(env, "Olivia")
    return await trip_service.create_trip(name, organizer)


async def make_member(
    env: AsyncContainer, trip_id: TripId, display_name: str = "Max"
) -> tuple[UserId, Participant]:
    """Add a new user to a trip as a real participant."""
    participant_service = await env.get(ParticipantService)
    user_id = await make_user(env, display_name)
    participant, _ = await participant_service.add_real_participant(trip_id, user_id)
    return user_id, participant


async def make_placeholder(
    env: AsyncContainer, trip: Trip, display_name: str = "Guest 1"
) -> Participant:
    """Add a placeholder to a trip on behalf of its organizer."""
    participant_service = await env.get(ParticipantService)
    return await participant_service.add_placeholder(
        trip.id, display_name, trip.organizer_id
    )
