"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. The database URL is either given whole (DATABASE_URL)
or assembled from the DB_* parts.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Signing key used when SECRET_KEY is not set. Rejected when environment is production.
INSECURE_DEFAULT_SECRET_KEY = "change-me-in-production"


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Every field has a development default. validate_settings rejects the
    insecure signing key in production and out-of-range bcrypt rounds.
    """

    # App
    app_name: str = "user-management-api"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Database: DATABASE_URL wins; otherwise built from the DB_* parts (asyncpg driver)
    database_url: str = ""
    db_host: str = "localhost"
    db_port: int = 5432
    db_username: str = "postgres"
    db_password: SecretStr = SecretStr("postgres")
    db_name: str = "offer_db"
    database_echo: bool = False
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_command_timeout: int = 60

    # Security
    secret_key: SecretStr = SecretStr(INSECURE_DEFAULT_SECRET_KEY)
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    bcrypt_rounds: int = 10
    # Max concurrent bcrypt computations off the event loop
    password_hash_concurrency: int = 4

    # CORS
    allowed_origins: str = "*"

    # Request / middleware
    request_timeout_seconds: int = 30
    request_id_header: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Fill database_url from parts; validate security settings."""
        if not self.database_url:
            self.database_url = (
                f"postgresql+asyncpg://{self.db_username}:"
                f"{self.db_password.get_secret_value()}@{self.db_host}:{self.db_port}/{self.db_name}"
            )
        if not 4 <= self.bcrypt_rounds <= 31:
            raise ValueError(
                f"BCRYPT_ROUNDS must be between 4 and 31, got: {self.bcrypt_rounds}"
            )
        if self.password_hash_concurrency < 1:
            raise ValueError("PASSWORD_HASH_CONCURRENCY must be at least 1")
        if self.environment == "production" and self.uses_insecure_secret_key:
            raise ValueError(
                "SECRET_KEY must be set in production. Generate with: openssl rand -hex 32"
            )
        return self

    @property
    def uses_insecure_secret_key(self) -> bool:
        """True when the token signing key is the built-in development default."""
        return self.secret_key.get_secret_value() in ("", INSECURE_DEFAULT_SECRET_KEY)


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
