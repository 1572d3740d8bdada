"""
Environment-driven settings for the todo service.

Values come from the process environment, optionally seeded from a
``.env`` file. Variables already set in the environment take precedence
over the file.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

HOST = "127.0.0.1"
PORT = 8000

_DRIVER_SCHEMES = {
    "postgres": "postgresql+asyncpg",
    "postgresql": "postgresql+asyncpg",
    "sqlite": "sqlite+aiosqlite",
}


class ConfigError(RuntimeError):
    pass


def normalize_database_url(url: str) -> str:
    """Point bare ``postgres``/``sqlite`` URLs at their async drivers.

    URLs that already name a driver (``scheme+driver://``) are returned
    untouched.
    """
    scheme, sep, rest = url.partition("://")
    if not sep:
        return url
    driver_scheme = _DRIVER_SCHEMES.get(scheme)
    if driver_scheme is None:
        return url
    return f"{driver_scheme}://{rest}"


@dataclass(frozen=True)
class Settings:
    database_url: str
    log_level: str = "INFO"
    host: str = HOST
    port: int = PORT

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))

        database_url = os.getenv("DATABASE_URL")
        if not database_url:
            raise ConfigError("DATABASE_URL is not set in the environment or .env file")

        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"LOG_LEVEL {log_level!r} is not a logging level")

        return cls(
            database_url=normalize_database_url(database_url),
            log_level=log_level,
        )
