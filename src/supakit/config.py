"""
supakit - Configuration and settings.

SupakitSettings reads the Supabase project coordinates and client defaults
from the environment (or a .env file). Nothing here builds a client; pass
the settings to supakit.client.create_from_settings().
"""

from functools import lru_cache
from typing import TYPE_CHECKING, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from supakit.options import ClientConfig


class SupakitSettings(BaseSettings):
    """
    Settings for building a Supabase client.

    SUPABASE_URL and SUPABASE_KEY are required to build a client but may be
    empty at load time so that `supakit health` can report them as missing.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Supabase project
    supabase_url: str = ""
    supabase_key: str = ""

    # Client defaults
    supabase_schema: str = "public"
    supabase_auto_refresh_token: bool = True
    supabase_persist_session: bool = True
    supabase_auto_connect_realtime: bool = False

    # Application
    supakit_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @property
    def is_development(self) -> bool:
        return self.supakit_env == "development"

    @property
    def is_production(self) -> bool:
        return self.supakit_env == "production"

    def validate_required(self) -> list[str]:
        """Return the environment variable names of missing required values."""
        missing = []
        if not self.supabase_url:
            missing.append("SUPABASE_URL")
        if not self.supabase_key:
            missing.append("SUPABASE_KEY")
        return missing

    def to_client_config(self) -> "ClientConfig":
        """Client options described by these settings."""
        from supakit.options import OptionsBuilder

        return (
            OptionsBuilder()
            .schema(self.supabase_schema)
            .auto_refresh_token(self.supabase_auto_refresh_token)
            .persist_session(self.supabase_persist_session)
            .auto_connect_realtime(self.supabase_auto_connect_realtime)
            .build()
        )


@lru_cache
def get_settings() -> SupakitSettings:
    """Get cached settings instance."""
    return SupakitSettings()


class _SettingsProxy:
    """Lazy proxy for settings to avoid loading .env at import time."""

    _instance: SupakitSettings | None = None

    def __getattr__(self, name: str):
        if self._instance is None:
            self._instance = get_settings()
        return getattr(self._instance, name)


settings = _SettingsProxy()
