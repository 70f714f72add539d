"""Client settings loaded from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"


class Settings(BaseSettings):
    # Credentials and app identification
    api_key: str = ""
    site_url: str = ""  # sent as HTTP-Referer
    site_name: str = ""  # sent as X-Title

    # Upstream
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 60.0  # seconds, applies to read/write/pool
    connect_timeout: float = 10.0

    # Logging
    log_level: str = "WARNING"
    log_file: str = ""  # Empty = stdout only

    model_config = {
        "env_prefix": "OPENROUTER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
