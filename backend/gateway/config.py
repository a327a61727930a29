"""Gateway Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - MAIN_SERVER_URL carries no trailing slash (area prefixes are appended to it)
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GatewaySettings(BaseSettings):
    """Gateway settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Main server
    main_server_url: str = "http://localhost:9090"

    @field_validator("main_server_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    main_server_timeout_seconds: float = 10.0
    main_server_max_retries: int = 2
    main_server_retry_base_delay_ms: int = 200
    main_server_retry_max_delay_ms: int = 2000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> GatewaySettings:
    return GatewaySettings()
