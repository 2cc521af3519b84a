"""
Application configuration via pydantic-settings.

Loads values from .env file with sensible defaults for local development.
Use ``get_settings()`` to obtain the cached singleton instance.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """TubeBrief settings loaded from environment / .env file.

    Field names map directly to env var names (case-insensitive).

    Attributes:
        api_base_url: Base URL of the web backend that exposes the user,
            transcript, analysis and saved-analyses endpoints.
        api_token: Optional bearer token forwarded on every request.
        request_timeout: Seconds before a regular API call is abandoned.
        analysis_timeout: Seconds allowed for the (slow) AI analysis call.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Silently ignore unrecognized env vars
    )

    app_name: str = "TubeBrief"

    # --- Backend API ---
    api_base_url: str = "http://localhost:3000"
    api_token: str = ""  # Empty = no Authorization header
    request_timeout: float = 30.0
    analysis_timeout: float = 120.0

    # --- Dashboard ---
    saved_analyses_limit: int = 20
    pricing_url: str = ""  # External checkout page; empty hides the button

    # --- Application ---
    log_level: str = "INFO"  # Python logging level


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings singleton.

    Uses ``functools.lru_cache`` so the .env file is read only once.
    """
    return Settings()
