"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from trip.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Settings are loaded from environment variables automatically. Callers
    open one request scope per engine call and resolve a use case from it:

        async with container() as request:
            use_case = await request.get(JoinTripUseCase)
            response = await use_case.execute(JoinTripRequest(...))
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances)
