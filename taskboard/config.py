"""Configuration for taskboard.

Settings come from environment variables, optionally loaded from a ``.env`` file.
"""

import os
from dataclasses import dataclass
from typing import Tuple
from dotenv import load_dotenv

load_dotenv()

APP_VERSION = "0.1.0"


@dataclass(frozen=True)
class Settings:
    """Runtime settings."""
    host: str
    port: int
    reload: bool
    log_level: str
    cors_origins: Tuple[str, ...]
    api_prefix: str


def _parse_origins(raw: str) -> Tuple[str, ...]:
    origins = tuple(origin.strip() for origin in raw.split(",") if origin.strip())
    return origins or ("*",)


def _parse_prefix(raw: str) -> str:
    prefix = raw.strip().strip("/")
    return f"/{prefix}" if prefix else ""


def get_settings() -> Settings:
    """Read settings from the environment."""
    return Settings(
        host=os.getenv("TASKBOARD_HOST", "0.0.0.0"),
        port=int(os.getenv("TASKBOARD_PORT", "3000")),
        reload=os.getenv("TASKBOARD_RELOAD", "False").lower() == "true",
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=_parse_origins(os.getenv("CORS_ORIGINS", "*")),
        api_prefix=_parse_prefix(os.getenv("API_PREFIX", "/api")),
    )
