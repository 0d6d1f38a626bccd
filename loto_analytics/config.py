"""Application configuration using Pydantic Settings."""

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    APP_NAME: str = "LotoAnalitica"
    APP_ENV: str = "development"
    DEBUG: bool = True

    # Logging
    LOG_DIR: Path = Path("./logs")
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: str = "7 days"

    # Dashboard feeds
    TREND_WINDOW: int = 50
    CONTEXT_TOP_N: int = 5

    # Upload
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024


settings = Settings()
