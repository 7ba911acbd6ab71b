"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from hoot.config import ApiSettings, Settings
from hoot.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide client settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_api_settings(self, settings: Settings) -> ApiSettings:
        """Provide backend settings."""
        return settings.api
