# Load .env vars from file before everything else
from dotenv import load_dotenv

load_dotenv()

from .logger import setup_logging  # noqa: E402

setup_logging()

from .config import CacheConfig, get_cache_config, set_cache_config  # noqa: E402
from .core.exceptions import (  # noqa: E402
    CacheConsistencyError,
    InvalidCapacityError,
    ListCorruptionError,
    LRUKitError,
    NodeStateError,
    StaleLocatorError,
)
from .core.lru_cache import CacheStats, LRUCache  # noqa: E402
from .core.node import Locator, Node, NodeState  # noqa: E402
from .core.ordered_list import ListIterator, OrderedList  # noqa: E402

__all__ = [
    "CacheConfig",
    "CacheConsistencyError",
    "CacheStats",
    "InvalidCapacityError",
    "ListCorruptionError",
    "ListIterator",
    "Locator",
    "LRUCache",
    "LRUKitError",
    "Node",
    "NodeState",
    "NodeStateError",
    "OrderedList",
    "StaleLocatorError",
    "get_cache_config",
    "set_cache_config",
    "setup_logging",
]
