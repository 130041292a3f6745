from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

from scoreboard.core.constants import MATCHES_LIMIT


class Settings(BaseSettings):
    matches_limit: int = MATCHES_LIMIT
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = ["*"]

    model_config = SettingsConfigDict(env_prefix="SCOREBOARD_", env_file=".env")


@lru_cache()
def get_settings():
    return Settings()
