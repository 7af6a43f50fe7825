"""Configuration management for the LearnStream API."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="LS_", extra="ignore")

    # Database
    database_url: str = "sqlite+aiosqlite:///./dev.db"
    db_pool_size: int = Field(default=5, ge=1)
    db_max_overflow: int = Field(default=20, ge=0)

    # Feed settings
    feed_limit_default: int = Field(default=10, ge=1)
    feed_limit_max: int = Field(default=50, ge=1)

    # CORS
    frontend_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    app_version: str = "1.0.0"

    # Environment
    env: str = Field(default="dev", pattern="^(dev|prod)$")


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
