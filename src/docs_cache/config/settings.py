"""Configuration settings for the build cache."""
import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

_LOG = logging.getLogger(__name__)

DEFAULT_TTL_MS = 1000 * 60 * 60 * 24  # 24 hours


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        _LOG.warning(f"invalid integer env {name}={raw!r}, using default={default}")
        return default


@dataclass
class CacheSettings:
    # Relative paths resolve against the build working directory
    directory: str = field(default_factory=lambda: os.getenv("DOCS_CACHE_DIR", ".cache"))
    filename: str = field(
        default_factory=lambda: os.getenv("DOCS_CACHE_FILE", "build-cache.json")
    )
    default_ttl_ms: int = field(
        default_factory=lambda: _env_int("DOCS_CACHE_DEFAULT_TTL_MS", DEFAULT_TTL_MS)
    )
    autosave: bool = field(default_factory=lambda: _env_bool("DOCS_CACHE_AUTOSAVE", True))

    @property
    def path(self) -> str:
        return os.path.join(self.directory, self.filename)


@dataclass
class LoggingSettings:
    level: str = field(default_factory=lambda: os.getenv("DOCS_CACHE_LOG_LEVEL", "INFO"))


class Settings:
    def __init__(self) -> None:
        self.cache = CacheSettings()
        self.logging = LoggingSettings()

    @property
    def cache_path(self) -> str:
        return self.cache.path


settings = Settings()
