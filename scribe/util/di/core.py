"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from scribe.config import AuthSettings, MediaSettings, Settings, UploadSettings
from scribe.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    Sections are provided separately so services depend only on what they use.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_media_settings(self, settings: Settings) -> MediaSettings:
        return settings.media

    @provide
    def provide_upload_settings(self, settings: Settings) -> UploadSettings:
        return settings.uploads
