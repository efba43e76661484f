"""Unit tests for provider selection and the production container."""

import pytest

from trip.config import CodeSettings, EngineSettings
from trip.util.di import PersistenceProvider, ProdPersistenceProvider, get_provider
from trip.util.di.base import ProviderBase
from trip.util.di.container import create_container
from trip.util.error import DependencyInjectionError
from tests.di import MockPersistenceProvider, build_test_container


class CacheProvider(ProviderBase):
    __mock_component__ = "cache"


class ProdCacheProvider(CacheProvider):
    __is_mock__ = False


class TestGetProvider:
    """Tests for get_provider."""

    def test_selects_by_mock_flag(self):
        assert get_provider(PersistenceProvider, use_mock=False) is ProdPersistenceProvider
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider

    def test_missing_implementation(self):
        with pytest.raises(DependencyInjectionError):
            get_provider(CacheProvider, use_mock=True)

    def test_unknown_unmock_component(self):
        with pytest.raises(DependencyInjectionError):
            build_test_container(unmock={"search"})


class TestProductionContainer:
    """Tests for create_container."""

    @pytest.mark.asyncio
    async def test_settings_come_from_environment(self, monkeypatch):
        monkeypatch.setenv("CODES__INVITE_MAX_USES", "25")
        monkeypatch.setenv("ENGINE__OPERATION_TIMEOUT_SECONDS", "2.5")
        container = create_container()

        try:
            codes = await container.get(CodeSettings)
            engine = await container.get(EngineSettings)
        finally:
            await container.close()

        assert codes.invite_max_uses == 25
        assert engine.operation_timeout_seconds == 2.5
