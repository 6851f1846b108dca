"""
Client configuration using Pydantic Settings.

Values can be overridden with ASSET_ANALYZER_* environment variables.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Settings for talking to the extraction backend."""

    # Base URL of the backend serving /api/process-pdf
    api_base_url: str = "http://localhost:8000"

    # Seconds allowed for a single HTTP exchange
    request_timeout: float = 120.0

    # Seconds allowed for one file end to end before it counts as failed
    per_file_timeout: float = 180.0

    model_config = SettingsConfigDict(
        env_prefix="ASSET_ANALYZER_",
        extra="ignore",
        case_sensitive=False,
    )


@lru_cache
def get_client_settings() -> ClientSettings:
    """Get cached client settings."""
    return ClientSettings()
