"""Legal Case Tracker — Configuration via pydantic-settings."""

from typing import Optional

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./legalcase.db"
    DATABASE_ECHO: bool = False

    # Security
    BCRYPT_ROUNDS: int = 12

    # Administrator seeded on an empty users table, only when a password is set
    DEFAULT_ADMIN_USERNAME: str = "admin"
    DEFAULT_ADMIN_PASSWORD: Optional[str] = None
    DEFAULT_ADMIN_EMAIL: str = "admin@legalcase.local"

    # Timezone used to decide which hearings are upcoming
    TIMEZONE: str = "UTC"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "./legalcase.log"  # empty string logs to stderr

    # Environment
    ENVIRONMENT: str = "development"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
