"""
Application configuration and settings.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# ── Paths ──────────────────────────────────────────────────────────────
PACKAGE_DIR = Path(__file__).resolve().parent
BASE_DIR = PACKAGE_DIR.parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"


class Settings(BaseSettings):
    """Overridable through POTHOLE_* environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="POTHOLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = BASE_DIR / "data"
    database_url: str | None = None
    host: str = "0.0.0.0"
    port: int = Field(3000, ge=1, le=65535)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def db_path(self) -> Path:
        return self.data_dir / "detections.db"

    @property
    def resolved_database_url(self) -> str:
        return self.database_url or f"sqlite:///{self.db_path}"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

# Database
DATA_DIR = settings.data_dir
DB_PATH = settings.db_path
DATABASE_URL = settings.resolved_database_url

# ── Server ─────────────────────────────────────────────────────────────
HOST = settings.host
PORT = settings.port
LOG_LEVEL = settings.log_level

# ── Dashboard ──────────────────────────────────────────────────────────
SITE_TITLE = "Drone Acharya"
MISSION_NAME = "Flight 082"

# Map falls back here when there is nothing to center on
DEFAULT_MAP_CENTER = (34.0522, -118.2437)
MAP_ZOOM = 15
TILE_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"

# ── Ensure directories exist ───────────────────────────────────────────
DATA_DIR.mkdir(parents=True, exist_ok=True)
