"""Disk-backed TTL cache for documentation site builds."""

from .core import (
    DEFAULT_TTL_MS,
    CacheEntry,
    CacheStats,
    CategoryCache,
    NamespacedCache,
    TTLCache,
    build_key,
    component_key,
    github_key,
    mdx_key,
    pattern_key,
)

__version__ = "0.1.0"

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
