"""
Test configuration and fixtures for lrukit tests.

Provides shared fixtures for:
- Environment variable isolation
- Global cache configuration reset
- Pre-populated lists and caches
"""

from typing import Dict

import pytest

from lrukit.config import CacheConfig, set_cache_config
from lrukit.core.lru_cache import LRUCache
from lrukit.core.ordered_list import OrderedList


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch):
    """Reset global configuration and lrukit env vars around every test."""
    for name in (
        "LRUKIT_DEFAULT_CAPACITY",
        "LRUKIT_CHECK_INVARIANTS",
        "LRUKIT_RICH_UI",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    set_cache_config(None)
    yield
    set_cache_config(None)


@pytest.fixture
def checked_config() -> CacheConfig:
    """Enable invariant checking for caches created in the test.

    Returns:
        The CacheConfig installed as global configuration.
    """
    config = CacheConfig(check_invariants=True)
    set_cache_config(config)
    return config


@pytest.fixture
def mixed_list() -> OrderedList:
    """Provide a list built from both ends.

    Returns:
        OrderedList holding [3, 1, 2, 4].
    """
    lst = OrderedList()
    lst.push_front(1)
    lst.push_back(2)
    lst.push_front(3)
    lst.push_back(4)
    return lst


@pytest.fixture
def word_cache(checked_config: CacheConfig) -> LRUCache:
    """Provide a default-capacity cache holding five string values.

    Returns:
        LRUCache with keys 1..5 inserted in order.
    """
    cache = LRUCache.new()
    words: Dict[int, str] = {1: "foo", 2: "bar", 3: "fizz", 4: "buzz", 5: "bazz"}
    for key, word in words.items():
        cache.put(key, word)
    return cache
