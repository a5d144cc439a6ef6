"""Settings providers.

Settings are read from the environment once per container; the nested
sections are exposed on their own so services only depend on what they use.
"""

from dishka import Scope, provide

from diu.config import APISettings, AuthSettings, Settings, StampSettings
from diu.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Application settings and their sections (APP scope)."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_api_settings(self, settings: Settings) -> APISettings:
        return settings.api

    @provide
    def provide_stamp_settings(self, settings: Settings) -> StampSettings:
        return settings.stamps
