# app/core/config.py
import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).parent.parent.parent

class Settings(BaseSettings):
    PROJECT_NAME: str = "Routine API"
    env: str = "local"
    DATABASE_URL: str = "sqlite:///./routine.db"
    DB_ECHO: bool = False

    # Create tables (and optionally seed) on startup instead of running Alembic
    DB_AUTO_CREATE: bool = False
    SEED_DEMO_DATA: bool = False

    # =========================
    # Listing
    # =========================
    DEFAULT_PAGE_SIZE: int = 5
    MAX_PAGE_SIZE: int = 20

    # CORS_ALLOW_ORIGINS="http://localhost:3000,https://example.com"
    CORS_ALLOW_ORIGINS: str | None = None

    model_config = SettingsConfigDict(
        env_file=os.path.join(PROJECT_ROOT, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

settings = Settings()
