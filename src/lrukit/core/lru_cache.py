"""
LRU cache built on an arena-backed recency list and a hash index.

The list keeps entries ordered from least to most recently used; the index maps
each live key to a locator for its node. Every operation that changes one of
the two structures updates the other in the same call, so a key is either
indexed with a live node or not indexed at all.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Generic, Hashable, Iterator, Optional, Tuple, TypeVar

from ..config import get_cache_config
from .exceptions import CacheConsistencyError, InvalidCapacityError, StaleLocatorError
from .node import Locator
from .ordered_list import OrderedList

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_MISSING = object()


@dataclass
class _Entry:
    key: Any
    value: Any


@dataclass
class CacheStats:
    """Counters for a cache instance."""

    hits: int = 0
    misses: int = 0
    inserts: int = 0
    updates: int = 0
    evictions: int = 0
    removals: int = 0

    @property
    def hit_rate(self) -> float:
        lookups = self.hits + self.misses
        return self.hits / lookups if lookups else 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class LRUCache(Generic[K, V]):
    """
    Fixed-capacity Least Recently Used cache with O(1) get and put.

    A hit on ``get`` or an update through ``put`` moves the entry to the most
    recently used position. Inserting past capacity evicts exactly one entry,
    the least recently used one.

    Args:
        capacity: Maximum number of entries. Defaults to the configured
            default capacity (10 unless LRUKIT_DEFAULT_CAPACITY is set).

    Raises:
        InvalidCapacityError: If capacity is not a positive integer.
    """

    def __init__(self, capacity: Optional[int] = None):
        config = get_cache_config()
        if capacity is None:
            capacity = config.resolve_default_capacity()
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise InvalidCapacityError(capacity)

        self._capacity = capacity
        self._list: OrderedList[_Entry] = OrderedList()
        self._index: Dict[K, Locator] = {}
        self._check_invariants = config.check_invariants
        self.stats = CacheStats()

    @classmethod
    def new(cls) -> "LRUCache[K, V]":
        """Create a cache with the default capacity."""
        return cls()

    @classmethod
    def with_capacity(cls, capacity: int) -> "LRUCache[K, V]":
        """Create a cache holding at most ``capacity`` entries."""
        return cls(capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def order(self) -> OrderedList:
        """Backing recency list, front is LRU and back is MRU. Read-only use."""
        return self._list

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Get a value and mark it most recently used; a miss changes nothing."""
        locator = self._index.get(key)
        if locator is None:
            self.stats.misses += 1
            return default

        entry = self._resolve(key, locator)
        self._list.move_node_to_back(locator)
        self.stats.hits += 1
        self._verify()
        return entry.value

    def put(self, key: K, value: V) -> None:
        """Insert or update a value, evicting the LRU entry if over capacity."""
        locator = self._index.get(key)
        if locator is not None:
            entry = self._resolve(key, locator)
            entry.value = value
            self._list.move_node_to_back(locator)
            self.stats.updates += 1
        else:
            self._list.push_back(_Entry(key, value))
            self._index[key] = self._list.get_tail_locator()
            self.stats.inserts += 1
            if len(self._list) > self._capacity:
                self._evict()
        self._verify()

    def peek(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Get a value without touching its recency or the hit/miss counters."""
        locator = self._index.get(key)
        if locator is None:
            return default
        return self._resolve(key, locator).value

    def remove(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Remove a key and return its value, or ``default`` if absent."""
        locator = self._index.pop(key, None)
        if locator is None:
            return default
        try:
            entry = self._list.remove_node(locator)
        except StaleLocatorError as e:
            raise CacheConsistencyError(
                f"Index entry for {key!r} points at a removed node"
            ) from e
        self.stats.removals += 1
        self._verify()
        return entry.value

    def clear(self) -> None:
        """Remove every entry. Counters are kept."""
        dropped = len(self._list)
        self._list.clear()
        self._index.clear()
        logger.debug(f"Cleared LRU cache ({dropped} entries dropped)")

    def keys(self, reverse: bool = False) -> Iterator[K]:
        """Iterate keys from least to most recently used (or the reverse)."""
        for entry in self._entries(reverse):
            yield entry.key

    def values(self, reverse: bool = False) -> Iterator[V]:
        """Iterate values from least to most recently used (or the reverse)."""
        for entry in self._entries(reverse):
            yield entry.value

    def items(self, reverse: bool = False) -> Iterator[Tuple[K, V]]:
        """Iterate (key, value) pairs from least to most recently used (or the reverse)."""
        for entry in self._entries(reverse):
            yield entry.key, entry.value

    def __contains__(self, key: object) -> bool:
        """Check if key exists in cache without refreshing it."""
        return key in self._index

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __getitem__(self, key: K) -> V:
        """Get item using bracket notation, moving to end if found."""
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __delitem__(self, key: K) -> None:
        if self.remove(key, _MISSING) is _MISSING:
            raise KeyError(key)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self._capacity}, "
            f"items={list(self.items())!r})"
        )

    def _entries(self, reverse: bool) -> Iterator[_Entry]:
        cursor = self._list.iter()
        return reversed(cursor) if reverse else cursor

    def _resolve(self, key: K, locator: Locator) -> _Entry:
        try:
            entry = self._list.get_value(locator)
        except StaleLocatorError as e:
            raise CacheConsistencyError(
                f"Index entry for {key!r} points at a removed node"
            ) from e
        if entry.key != key:
            raise CacheConsistencyError(
                f"Index entry for {key!r} resolves to the node of {entry.key!r}"
            )
        return entry

    def _evict(self) -> None:
        entry = self._list.pop_front()
        if self._index.pop(entry.key, None) is None:
            raise CacheConsistencyError(
                f"Evicted key {entry.key!r} was not present in the index"
            )
        self.stats.evictions += 1
        logger.debug(
            f"Evicted {entry.key!r} from LRU cache (capacity {self._capacity})"
        )

    def _verify(self) -> None:
        if not self._check_invariants:
            return
        self._list.validate()
        if len(self._index) != len(self._list):
            raise CacheConsistencyError(
                f"Index holds {len(self._index)} keys, list holds {len(self._list)} nodes"
            )
        if len(self._list) > self._capacity:
            raise CacheConsistencyError(
                f"List holds {len(self._list)} nodes, capacity is {self._capacity}"
            )
        for key, locator in self._index.items():
            self._resolve(key, locator)
