"""Configuration providers (never mocked)."""

from dishka import Scope, provide

from alumni.config import AuthSettings, BootstrapSettings, Settings
from alumni.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Exposes settings and the sections services depend on.

    Services ask for the narrowest section they need, so tests can build
    them from ``AuthSettings`` or ``BootstrapSettings`` alone.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_bootstrap_settings(self, settings: Settings) -> BootstrapSettings:
        return settings.bootstrap
