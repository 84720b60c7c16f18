"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from discuss.config import Settings
from discuss.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Configuration provider.

    Settings are read from environment variables and .env once per container.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()
