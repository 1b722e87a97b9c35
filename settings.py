# settings.py
import os

# Basic settings helper to read environment configuration.

STORAGE_BACKENDS = ("memory", "sql")


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_list(val: str | None, default: list[str]) -> list[str]:
    if not val:
        return default
    return [item.strip() for item in val.split(",") if item.strip()]


class Settings:
    def __init__(self) -> None:
        self.STORAGE: str = os.getenv("BOOKSTORE_STORAGE", "memory").lower()
        self.DATABASE_URL: str = os.getenv("BOOKSTORE_DATABASE_URL", "sqlite+aiosqlite:///./books.db")
        self.SEED: bool = _as_bool(os.getenv("BOOKSTORE_SEED"), True)
        self.LOG_LEVEL: str = os.getenv("BOOKSTORE_LOG_LEVEL", "INFO").upper()
        self.CORS_ORIGINS: list[str] = _as_list(os.getenv("BOOKSTORE_CORS_ORIGINS"), ["*"])

        if self.STORAGE not in STORAGE_BACKENDS:
            raise ValueError(
                f"BOOKSTORE_STORAGE must be one of {', '.join(STORAGE_BACKENDS)}, got {self.STORAGE!r}"
            )
