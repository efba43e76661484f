"""Configuration DI providers (non-mockable)."""

from dishka import Scope, provide

from trip.config import CodeSettings, EngineSettings, ParticipantSettings, Settings
from trip.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings loaded once per container from the environment and ``.env``."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_code_settings(self, settings: Settings) -> CodeSettings:
        return settings.codes

    @provide(scope=Scope.APP)
    def provide_participant_settings(self, settings: Settings) -> ParticipantSettings:
        return settings.participants

    @provide(scope=Scope.APP)
    def provide_engine_settings(self, settings: Settings) -> EngineSettings:
        return settings.engine
