from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # --- logging ---
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None  # file logging is off unless a directory is given

    # --- generation defaults ---
    DEFAULT_PREFERENCE: str = "shortBreaks"
    DEFAULT_MAX_RESULTS: Optional[int] = None
    DEFAULT_ENUMERATION_LIMIT: Optional[int] = None

    model_config = SettingsConfigDict(
        env_prefix="SCHEDULER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )


settings = Settings()
