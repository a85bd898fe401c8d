"""Shared fixtures: a controllable millisecond clock and throwaway cache dirs."""

import pytest

from docs_cache.core.cache import TTLCache

START_MS = 1_700_000_000_000


class FakeClock:
    def __init__(self, now: int = START_MS) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache_dir(tmp_path):
    return tmp_path / ".cache"


@pytest.fixture
def snapshot_path(cache_dir):
    return cache_dir / "build-cache.json"


@pytest.fixture
def make_cache(cache_dir, clock):
    """Build a fresh TTLCache on the shared snapshot, like a new build process."""

    def _make(**kwargs):
        kwargs.setdefault("cache_dir", str(cache_dir))
        kwargs.setdefault("cache_file", "build-cache.json")
        kwargs.setdefault("clock", clock)
        kwargs.setdefault("autosave", True)
        return TTLCache(**kwargs)

    return _make


@pytest.fixture
def cache(make_cache):
    return make_cache()
