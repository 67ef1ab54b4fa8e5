"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from agora.config import AuthSettings, CacheSettings, CommentSettings, Settings
from agora.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and their sections, loaded once per application.

    Settings are read from environment variables and the .env file.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment settings."""
        return settings.comments

    @provide
    def provide_cache_settings(self, settings: Settings) -> CacheSettings:
        """Provide query cache settings."""
        return settings.cache
