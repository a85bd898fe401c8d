"""
Namespaced cache keys for the documentation build.

Each payload category gets its own prefix so a component called ``button``
and a pattern called ``button`` never share an entry. Identifiers are not
validated; an odd identifier just produces an odd key.
"""

from typing import Any, Callable, Optional

from .cache import TTLCache

BUILD_METADATA_KEY = "build:metadata"


def component_key(name: str) -> str:
    return f"component:{name}"


def pattern_key(pattern_id: str) -> str:
    return f"pattern:{pattern_id}"


def mdx_key(file_path: str) -> str:
    return f"mdx:{file_path}"


def github_key(endpoint: str) -> str:
    return f"github:{endpoint}"


def build_key() -> str:
    return BUILD_METADATA_KEY


class CategoryCache:
    """get/set/delete for one payload category, keyed by its bare identifier."""

    def __init__(self, cache: TTLCache, key_fn: Callable[[str], str]) -> None:
        self._cache = cache
        self._key_fn = key_fn

    def key(self, identifier: str) -> str:
        return self._key_fn(identifier)

    def get(self, identifier: str) -> Optional[Any]:
        return self._cache.get(self._key_fn(identifier))

    def set(self, identifier: str, data: Any, ttl: Optional[int] = None) -> None:
        self._cache.set(self._key_fn(identifier), data, ttl)

    def delete(self, identifier: str) -> None:
        self._cache.delete(self._key_fn(identifier))


class NamespacedCache:
    """Category accessors over a shared TTLCache.

    Usage:
        ns = NamespacedCache(cache)
        doc = ns.component.get("Button")
        if doc is None:
            doc = parse_component("Button")
            ns.component.set("Button", doc)
    """

    def __init__(self, cache: TTLCache) -> None:
        self.cache = cache
        self.component = CategoryCache(cache, component_key)
        self.pattern = CategoryCache(cache, pattern_key)
        self.mdx = CategoryCache(cache, mdx_key)
        self.github = CategoryCache(cache, github_key)

    def get_build_metadata(self) -> Optional[Any]:
        return self.cache.get(build_key())

    def set_build_metadata(self, data: Any, ttl: Optional[int] = None) -> None:
        self.cache.set(build_key(), data, ttl)
