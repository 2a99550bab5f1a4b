"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. The search engine URL and key are required and
validated at load time.
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    search_engine_url and search_engine_key have no usable default; they are
    checked in validate_search_engine. MEILI_URL / MEILI_KEY are accepted as
    aliases.
    """

    # App
    app_name: str = "unitfinder"
    app_version: str = "1.0.0"
    debug: bool = False

    # Search engine (process-wide, read-only)
    search_engine_url: str = Field(
        default="",
        validation_alias=AliasChoices("search_engine_url", "meili_url"),
    )
    search_engine_key: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("search_engine_key", "meili_key"),
    )
    search_engine_timeout_seconds: float = 30.0

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8788"

    # Request / middleware
    request_timeout_seconds: int = 60
    request_id_header: str = "X-Request-ID"
    correlation_id_header: str = "X-Correlation-ID"

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_search_engine(self) -> "Settings":
        """Require engine URL and key; normalize the URL (no trailing slash)."""
        if not self.search_engine_url:
            raise ValueError(
                "SEARCH_ENGINE_URL is required (base URL of the search engine, "
                "e.g. http://127.0.0.1:7700). Set in environment or .env file."
            )
        if not self.search_engine_url.startswith(("http://", "https://")):
            raise ValueError(
                f"SEARCH_ENGINE_URL must be an http(s) URL, got: {self.search_engine_url!r}"
            )
        if not self.search_engine_key.get_secret_value():
            raise ValueError(
                "SEARCH_ENGINE_KEY is required (search engine API key). "
                "Set in environment or .env file."
            )
        self.search_engine_url = self.search_engine_url.rstrip("/")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
