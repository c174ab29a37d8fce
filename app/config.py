from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from sqlalchemy.engine import URL


SQLITE_FALLBACK_URL = "sqlite+aiosqlite:///./taskboard.db"


@dataclass(frozen=True)
class Settings:
    database_url: str
    pool_size: int = 5
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _database_url() -> str:
    explicit = _getenv("DATABASE_URL")
    if explicit:
        return explicit
    host = _getenv("DB_HOST")
    if host is None:
        return SQLITE_FALLBACK_URL
    url = URL.create(
        "postgresql+asyncpg",
        username=_getenv("DB_USER"),
        password=_getenv("DB_PASS"),
        host=host,
        port=int(_getenv("DB_PORT", "5432") or "5432"),
        database=_getenv("DB_NAME"),
    )
    return url.render_as_string(hide_password=False)


def get_settings() -> Settings:
    """
    The only place environment variables are read.
    Loads `.env` if present, without overriding the real environment.
    """
    load_dotenv(override=False)

    return Settings(
        database_url=_database_url(),
        pool_size=int(_getenv("DB_POOL_SIZE", "5") or "5"),
        host=_getenv("HOST", "0.0.0.0") or "0.0.0.0",
        port=int(_getenv("PORT", "3000") or "3000"),
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
