"""Cache core: TTL store, snapshot schemas and key namespacing."""

from .cache import DEFAULT_TTL_MS, TTLCache
from .keys import (
    CategoryCache,
    NamespacedCache,
    build_key,
    component_key,
    github_key,
    mdx_key,
    pattern_key,
)
from .schemas import CacheEntry, CacheStats

__all__ = [
    "DEFAULT_TTL_MS",
    "TTLCache",
    "CacheEntry",
    "CacheStats",
    "CategoryCache",
    "NamespacedCache",
    "build_key",
    "component_key",
    "github_key",
    "mdx_key",
    "pattern_key",
]
