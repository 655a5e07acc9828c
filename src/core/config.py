"""Application configuration using pydantic-settings."""
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage - SQLite database file lives under data_dir (e.g. a mounted volume)
    data_dir: Path = Path("./data")
    database_filename: str = "peek.db"

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 3000

    # Bearer token protecting every endpoint except health checks; empty disables auth
    api_key: str = ""

    log_level: str = "INFO"

    @property
    def database_path(self) -> Path:
        """Full path to the SQLite database file."""
        return self.data_dir / self.database_filename

    @property
    def database_url(self) -> str:
        """SQLAlchemy async URL for the SQLite database."""
        return f"sqlite+aiosqlite:///{self.database_path}"

    @property
    def auth_enabled(self) -> bool:
        """Whether requests must present the API key."""
        return bool(self.api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
