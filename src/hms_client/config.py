from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    API_URL: str = "http://localhost:5000"
    API_PREFIX: str = "/api"
    API_TOKEN: str = ""

    HTTP_TIMEOUT_SECONDS: float = 10.0

    REALTIME_URL: str | None = None
    REALTIME_TRANSPORTS: list[Literal["websocket", "polling"]] = ["websocket", "polling"]
    REALTIME_RECONNECT_ATTEMPTS: int = 0
    REALTIME_RECONNECT_DELAY: float = 1.0
    REALTIME_RECONNECT_DELAY_MAX: float = 30.0
    REALTIME_RECONNECT_JITTER: float = 0.5

    SEARCH_DEBOUNCE_SECONDS: float = 0.3
    SEARCH_MIN_QUERY_LENGTH: int = 2

    LOG_LEVEL: str = "INFO"

    @property
    def api_base_url(self) -> str:
        return f"{self.API_URL.rstrip('/')}{self.API_PREFIX}"

    @property
    def realtime_url(self) -> str:
        return self.REALTIME_URL or self.API_URL

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
