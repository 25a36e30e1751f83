"""Centralized configuration for lrukit caches."""

import os
from dataclasses import dataclass
from typing import Optional, Union

from .core.exceptions import InvalidCapacityError

DEFAULT_CAPACITY = 10


def _parse_capacity(raw: str) -> Union[int, str]:
    try:
        return int(raw)
    except ValueError:
        return raw


@dataclass
class CacheConfig:
    """Configuration for cache construction and debugging."""

    default_capacity: Union[int, str] = DEFAULT_CAPACITY
    check_invariants: bool = False

    @classmethod
    def from_env(cls) -> "CacheConfig":
        """Load configuration from environment variables.

        Environment variables:
        - LRUKIT_DEFAULT_CAPACITY: Capacity used by LRUCache() (default: 10)
        - LRUKIT_CHECK_INVARIANTS: Validate list and index after every
          mutation (default: false)

        The default capacity is kept as given and only validated by
        resolve_default_capacity(), so a bad value does not affect caches
        built with an explicit capacity.

        Returns:
            CacheConfig initialized from environment variables.
        """
        return cls(
            default_capacity=_parse_capacity(
                os.getenv("LRUKIT_DEFAULT_CAPACITY", str(DEFAULT_CAPACITY))
            ),
            check_invariants=os.getenv("LRUKIT_CHECK_INVARIANTS", "false").lower()
            in ("true", "1", "yes"),
        )

    def resolve_default_capacity(self) -> int:
        """Return the default capacity after checking it is a positive integer.

        Raises:
            InvalidCapacityError: If the configured default is not usable.
        """
        capacity = self.default_capacity
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise InvalidCapacityError(capacity)
        return capacity


# Global default configuration
_config: Optional[CacheConfig] = None


def get_cache_config() -> CacheConfig:
    """Get global cache configuration (lazy-loaded).

    Returns:
        CacheConfig instance initialized from environment.
    """
    global _config
    if _config is None:
        _config = CacheConfig.from_env()
    return _config


def set_cache_config(config: Optional[CacheConfig]) -> None:
    """Set global cache configuration (for testing).

    Args:
        config: CacheConfig to set as global, or None to reload from the
            environment on next access.
    """
    global _config
    _config = config
