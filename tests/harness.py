"""Test harness for unit and integration tests.

Integration tests assume PostgreSQL is already running and migrated.
Settings are loaded from environment variables (configure via .env or export).
"""

import pytest_asyncio

from trip.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for fixtures yielding one request-scoped container.

    Services and repositories resolved from the yielded container share a
    single request, the same way one engine call sees them.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - in-memory store, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_join(unit_env):
            use_case = await unit_env.get(JoinTripUseCase)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_app_env_fixture(unmock: set[Component] | None = None):
    """Factory for fixtures yielding the app-scoped container.

    Tests open their own request scopes from it, e.g. several at once to
    race two engine calls against the same store:

        async with app_env() as first, app_env() as second:
            ...
    """

    @pytest_asyncio.fixture
    async def _app_environment():
        container = build_test_container(unmock=unmock or set())
        yield container
        await container.close()

    return _app_environment
