"""
Disk-backed TTL cache for documentation builds.
Why: parsed components, MDX transforms and API lookups are slow to rebuild;
keep them in one JSON snapshot between runs. Fail-open on every I/O error.
"""

import json
import os
import time
from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError

from ..config.settings import DEFAULT_TTL_MS, Settings, settings as default_settings
from ..logging import get_logger
from .schemas import CacheEntry, CacheStats

_LOG = get_logger(__name__)

Clock = Callable[[], int]


def _now_ms() -> int:
    return int(time.time() * 1000)


class TTLCache:
    """Single-process key/value cache persisted to one JSON file.

    The snapshot is loaded lazily on first use and rewritten in full after
    every mutation (or on ``flush()`` when ``autosave`` is off). Read, parse
    and write failures are logged and never raised; an unreadable snapshot
    means an empty cache. Only caller errors, such as a payload that cannot
    be serialized to JSON, propagate.
    """

    def __init__(
        self,
        cache_dir: Optional[str] = None,
        cache_file: Optional[str] = None,
        default_ttl_ms: Optional[int] = None,
        clock: Optional[Clock] = None,
        autosave: Optional[bool] = None,
    ) -> None:
        cfg = default_settings.cache
        self.cache_dir = cache_dir if cache_dir is not None else cfg.directory
        self.cache_file = cache_file if cache_file is not None else cfg.filename
        self.default_ttl_ms = (
            default_ttl_ms if default_ttl_ms is not None else cfg.default_ttl_ms
        )
        self.autosave = autosave if autosave is not None else cfg.autosave
        self._clock: Clock = clock or _now_ms
        self._entries: Dict[str, CacheEntry] = {}
        self._initialized = False
        self._dirty = False

    @classmethod
    def from_settings(cls, config: Settings, clock: Optional[Clock] = None) -> "TTLCache":
        return cls(
            cache_dir=config.cache.directory,
            cache_file=config.cache.filename,
            default_ttl_ms=config.cache.default_ttl_ms,
            clock=clock,
            autosave=config.cache.autosave,
        )

    @property
    def path(self) -> str:
        return os.path.join(self.cache_dir, self.cache_file)

    # lifecycle

    def initialize(self) -> None:
        if self._initialized:
            return
        try:
            os.makedirs(self.cache_dir, exist_ok=True)
        except OSError:
            _LOG.warning(f"failed to create cache dir={self.cache_dir}", exc_info=True)
        try:
            self._load()
        finally:
            self._initialized = True

    def _load(self) -> None:
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError, RecursionError):
            _LOG.warning(f"failed to load cache path={self.path}", exc_info=True)
            return
        if not isinstance(raw, dict):
            _LOG.warning(
                f"ignoring cache snapshot path={self.path} "
                f"reason=expected object got {type(raw).__name__}"
            )
            return
        for key, value in raw.items():
            try:
                self._entries[key] = CacheEntry.model_validate(value)
            except ValidationError as e:
                _LOG.warning(f"skipping malformed cache entry key={key} errors={e.error_count()}")
        _LOG.debug(f"cache loaded path={self.path} entries={len(self._entries)}")

    # reads

    def get(self, key: str) -> Optional[Any]:
        self.initialize()
        entry = self._entries.get(key)
        if entry is None:
            return None
        if not entry.is_valid(self._clock()):
            # evicted in memory only; the next write drops it from disk
            del self._entries[key]
            return None
        return entry.data

    def has(self, key: str) -> bool:
        return self.get(key) is not None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __len__(self) -> int:
        self.initialize()
        return len(self._entries)

    def get_stats(self) -> CacheStats:
        self.initialize()
        now = self._clock()
        valid = sum(1 for entry in self._entries.values() if entry.is_valid(now))
        expired = len(self._entries) - valid
        checked = valid + expired
        return CacheStats(
            total=len(self._entries),
            valid=valid,
            expired=expired,
            hit_rate=valid / checked if checked else 0.0,
        )

    # writes

    def set(self, key: str, data: Any, ttl: Optional[int] = None) -> None:
        self.initialize()
        # stored in JSON form, so reads match a reloaded snapshot and later
        # mutation of the caller's object cannot reach the cache.
        # TypeError/ValueError propagate before the map is touched.
        stored = json.loads(json.dumps(data))
        self._entries[key] = CacheEntry(
            data=stored,
            created_at=self._clock(),
            ttl=self.default_ttl_ms if ttl is None else ttl,
        )
        self._changed()

    def get_or_set(self, key: str, factory: Callable[[], Any], ttl: Optional[int] = None) -> Any:
        value = self.get(key)
        if value is None:
            self.set(key, factory(), ttl)
            value = self._entries[key].data
        return value

    def delete(self, key: str) -> None:
        self.initialize()
        self._entries.pop(key, None)
        self._changed()

    def clear(self) -> None:
        self.initialize()
        self._entries.clear()
        self._changed()

    def prune(self) -> int:
        self.initialize()
        now = self._clock()
        stale = [key for key, entry in self._entries.items() if not entry.is_valid(now)]
        for key in stale:
            del self._entries[key]
        self._changed()
        return len(stale)

    # persistence

    def flush(self) -> None:
        self.initialize()
        self._persist()

    def _changed(self) -> None:
        self._dirty = True
        if self.autosave:
            self._persist()

    def _persist(self) -> None:
        snapshot = {key: entry.to_snapshot() for key, entry in self._entries.items()}
        try:
            text = json.dumps(snapshot, indent=2, ensure_ascii=False)
        except (TypeError, ValueError):
            # a payload returned by get() was mutated in place
            _LOG.warning(f"failed to serialize cache path={self.path}", exc_info=True)
            return
        try:
            os.makedirs(self.cache_dir, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError:
            _LOG.warning(f"failed to persist cache path={self.path}", exc_info=True)
            return
        self._dirty = False
        _LOG.debug(f"cache persisted path={self.path} entries={len(snapshot)}")

    @property
    def dirty(self) -> bool:
        return self._dirty


__all__ = ["DEFAULT_TTL_MS", "TTLCache"]
