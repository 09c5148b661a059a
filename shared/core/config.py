import json
from functools import lru_cache
from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.core import ENV_FILE
from shared.utils.timezone_utils import get_local_timezone


class Settings(BaseSettings):
    """
    Application-wide configuration settings.
    Loaded from environment variables or .env files.
    """

    # === General ===
    APP_NAME: str = "World Clock Sync API"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: Literal[
        "local", "development", "testing", "production", "staging"
    ] = "local"
    APP_HOST: str = "0.0.0.0"  # nosec B104
    APP_PORT: int = 8000
    LOG_LEVEL: str = "info"
    APP_URL: Optional[str] = "http://localhost:3000"
    DESCRIPTION: str = (
        "Synchronized world clock and timezone conversion API, built with FastAPI."
    )

    # === CORS / reference endpoint allow-list ===
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://127.0.0.1:3000"

    # === Reference clock ===
    # Unset means startup skips synchronization and runs on the local clock.
    REFERENCE_TIME_URL: Optional[str] = None
    REFERENCE_TIME_TIMEOUT_SECONDS: float = 5.0
    REFERENCE_SYNC_ATTEMPTS: int = 3
    REFERENCE_SYNC_RETRY_DELAY_SECONDS: int = 2

    # === World clock ===
    VIEWER_TIMEZONE: str = Field(default_factory=get_local_timezone)
    TICK_INTERVAL_SECONDS: float = 1.0
    CITY_CATALOG_PATH: Optional[str] = None

    # === Pydantic config ===
    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="allow",
    )

    @property
    def cors_origins(self) -> List[str]:
        try:
            parsed = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(parsed, list):
                return parsed
        except json.JSONDecodeError:
            pass

        return [
            origin.strip()
            for origin in self.ALLOWED_ORIGINS.split(",")
            if origin.strip()
        ]

    @property
    def reference_allowed_origins(self) -> List[str]:
        """Origins allowed to read the reference time endpoint."""
        origins = [
            self.APP_URL,
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            *self.cors_origins,
        ]
        return [origin.rstrip("/") for origin in origins if origin]


# === Singleton accessor (ensures one instance only) ===
@lru_cache()
def get_settings() -> Settings:
    return Settings()


# === Load settings ===
settings: Settings = get_settings()
