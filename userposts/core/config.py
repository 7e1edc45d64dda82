# userposts/core/config.py

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Application settings, read from USERPOSTS_* environment variables."""

    database_url: str = "sqlite:///./userposts.db"
    sql_echo: bool = False
    seed_data: bool = True
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8080

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.getenv("USERPOSTS_DATABASE_URL", cls.database_url),
            sql_echo=_env_bool("USERPOSTS_SQL_ECHO", cls.sql_echo),
            seed_data=_env_bool("USERPOSTS_SEED_DATA", cls.seed_data),
            log_level=os.getenv("USERPOSTS_LOG_LEVEL", cls.log_level).upper(),
            host=os.getenv("USERPOSTS_HOST", cls.host),
            port=int(os.getenv("USERPOSTS_PORT", str(cls.port))),
        )
