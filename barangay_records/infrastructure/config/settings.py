from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = "Barangay Records"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database
    database_url: str = ""  # Loaded from environment, validated in model_validator
    database_echo: bool = False

    # Security
    secret_key: str = ""  # Loaded from environment, validated in model_validator
    refresh_secret_key: str = ""  # Falls back to secret_key when empty
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 7 * 24 * 60  # 7 days
    refresh_token_expire_days: int = 30

    # Identity lookups must finish within this window or the request is rejected
    identity_lookup_timeout_seconds: float = 5.0

    # Best-effort last_seen_at stamping after admitted requests
    track_last_seen: bool = False

    # Login throttling (slowapi limit string)
    login_rate_limit: str = "5/minute"

    # CORS - comma-separated list of allowed origins
    allowed_origins: str = "http://localhost:5173"

    @model_validator(mode="after")
    def validate_required_config(self) -> "Settings":
        """Validate required configuration"""
        if not self.database_url:
            raise ValueError("DATABASE_URL is required. Set in environment or .env file.")
        if not self.secret_key:
            raise ValueError("SECRET_KEY is required. Generate with: openssl rand -hex 32")
        if self.identity_lookup_timeout_seconds <= 0:
            raise ValueError("IDENTITY_LOOKUP_TIMEOUT_SECONDS must be positive")
        return self

    @property
    def effective_refresh_secret(self) -> str:
        return self.refresh_secret_key or self.secret_key

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", case_sensitive=False
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
