# timelogger/core/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    """
    Environment variables and application settings.
    Values are read from the environment and from .env.
    """
    # Database
    DATABASE_URL: str = "sqlite:///:memory:"
    SEED_DATABASE: bool = True

    # App meta
    ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    # Comma-separated list, e.g. "http://localhost:3000,http://localhost:5173"
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Local time tracker
    TIMER_STATE_FILE: str = "~/.timelogger/timer.json"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @property
    def allowed_origins(self) -> List[str]:
        return [i.strip() for i in self.ALLOWED_ORIGINS.split(",") if i.strip()]

settings = Settings()
