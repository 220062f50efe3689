from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    # Worker pool bounds
    MIN_WORKERS: int = 2
    MAX_WORKERS: int = 20000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Environment variables only, no .env file
    model_config = SettingsConfigDict(
        env_prefix="FIELDRULES_",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
