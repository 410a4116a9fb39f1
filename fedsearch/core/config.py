"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Required fields (e.g. SECRET_KEY) are validated at
load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults except SECRET_KEY, which is
    needed to verify bearer tokens on the search routes.
    """

    # App
    app_name: str = "fedsearch"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (content stores + search history). Empty URL = SQL not configured.
    database_url: str = ""
    database_echo: bool = False
    db_pool_size: int | None = None
    db_max_overflow: int | None = None

    # Security (token verification only; tokens are issued elsewhere)
    secret_key: SecretStr = SecretStr("")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:5173"

    # Request / middleware
    request_timeout_seconds: int = 30
    request_id_header: str = "X-Request-ID"
    correlation_id_header: str = "X-Correlation-ID"

    # Redis cache
    redis_enabled: bool = True
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None

    # Language model (intent parsing). No key = always use the keyword fallback.
    openrouter_api_key: SecretStr | None = None
    openrouter_url: str = "https://openrouter.ai/api/v1/chat/completions"
    openrouter_model: str = "anthropic/claude-3-haiku"
    openrouter_temperature: float = 0.3
    openrouter_max_tokens: int = 500
    openrouter_top_p: float = 0.9
    openrouter_timeout_seconds: float = 8.0
    openrouter_referer: str = "https://sign-company-dashboard.com"
    openrouter_title: str = "Sign Company Dashboard Search"

    # Search
    search_per_source_limit: int = 10
    search_max_results: int = 20
    search_adapter_timeout_seconds: float = 5.0
    search_cache_ttl_seconds: int = 900  # 15 minutes
    search_cache_normalize_keys: bool = True
    search_history_cap: int = 100
    search_history_retention_days: int = 90
    search_rate_limit: str = "60/minute"

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
    def validate_required(self) -> "Settings":
        """Validate required env and search bounds."""
        if not self.secret_key.get_secret_value():
            raise ValueError(
                "SECRET_KEY is required. Generate with: openssl rand -hex 32."
            )
        if self.search_per_source_limit < 1 or self.search_max_results < 1:
            raise ValueError(
                "SEARCH_PER_SOURCE_LIMIT and SEARCH_MAX_RESULTS must be >= 1"
            )
        if self.search_adapter_timeout_seconds <= 0:
            raise ValueError("SEARCH_ADAPTER_TIMEOUT_SECONDS must be > 0")
        if self.search_history_cap < 1:
            raise ValueError("SEARCH_HISTORY_CAP must be >= 1")
        return self

    @property
    def llm_configured(self) -> bool:
        """True when an OpenRouter API key is set."""
        return bool(
            self.openrouter_api_key and self.openrouter_api_key.get_secret_value()
        )


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
