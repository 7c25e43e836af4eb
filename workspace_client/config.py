"""Runtime settings and log setup for the workspace client."""
from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from urllib.parse import urlparse

from loguru import logger

DEFAULT_API_BASE = "http://localhost:8000/api"
DEFAULT_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function}:{line} | {message}"
VALID_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class ClientSettings:
    api_base: str = DEFAULT_API_BASE
    page_limit: int = 5
    debounce_ms: int = 300
    http_timeout: float = 30.0
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        parsed = urlparse(self.api_base)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError("api_base must include scheme and host")
        if self.page_limit <= 0:
            raise ValueError("page_limit must be > 0")
        if self.debounce_ms < 0:
            raise ValueError("debounce_ms must be >= 0")
        if self.http_timeout <= 0:
            raise ValueError("http_timeout must be > 0")
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {VALID_LOG_LEVELS}")

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """Build settings from ``WORKSPACE_*`` environment variables."""

        return cls(
            api_base=os.getenv("WORKSPACE_API_BASE") or DEFAULT_API_BASE,
            page_limit=int(os.getenv("WORKSPACE_PAGE_LIMIT") or 5),
            debounce_ms=int(os.getenv("WORKSPACE_DEBOUNCE_MS") or 300),
            http_timeout=float(os.getenv("WORKSPACE_HTTP_TIMEOUT") or 30.0),
            log_level=(os.getenv("WORKSPACE_LOG_LEVEL") or "INFO").upper(),
        )


def setup_logging(settings: ClientSettings) -> None:
    """Replace loguru's default sink with one honouring ``settings.log_level``."""

    logger.remove()
    logger.add(
        sys.stderr,
        format=DEFAULT_LOG_FORMAT,
        level=settings.log_level.upper(),
        colorize=True,
    )
