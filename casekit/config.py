from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    app_name: str = Field(default="casekit", alias="APP_NAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_color: bool = Field(default=True, alias="LOG_COLOR")

    model_config = {"env_prefix": "", "extra": "ignore", "env_file": ".env"}

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value):
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings to avoid reloading from environment each time.
    """
    return Settings()
