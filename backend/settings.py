import os
from pathlib import Path

# Basic settings helper to read environment configuration.

BACKEND_ROOT = Path(__file__).resolve().parent


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_int(val: str | None, default: int) -> int:
    if val is None or not val.strip():
        return default
    return int(val)


class Settings:
    def __init__(self) -> None:
        self.DATABASE_URL: str = os.getenv(
            "BOOKSHELF_DATABASE_URL", f"sqlite:///{BACKEND_ROOT / 'bookshelf.db'}"
        )
        self.LOG_LEVEL: str = os.getenv("BOOKSHELF_LOG_LEVEL", "INFO").upper()
        self.SQL_ECHO: bool = _as_bool(os.getenv("BOOKSHELF_SQL_ECHO"), False)
        self.CORS_MAX_AGE: int = _as_int(os.getenv("BOOKSHELF_CORS_MAX_AGE"), 86400)


settings = Settings()
