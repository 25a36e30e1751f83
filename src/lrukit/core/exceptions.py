"""Custom exceptions for lrukit.

Misses are not errors; everything here signals a broken precondition or
invariant and is raised before any state is mutated.
"""


class LRUKitError(Exception):
    """Base exception for lrukit errors."""

    pass


class InvalidCapacityError(LRUKitError, ValueError):
    """Raised when a cache capacity is not a positive integer."""

    def __init__(self, capacity: object):
        self.capacity = capacity
        super().__init__(
            f"Cache capacity must be a positive integer, got {capacity!r}. "
            "A capacity of 0 would evict every entry as soon as it is inserted."
        )


class StaleLocatorError(LRUKitError, LookupError):
    """Raised when a locator no longer refers to a live node.

    This happens once the node was popped, removed or cleared: freeing a slot
    bumps its generation, so every locator handed out for it stops resolving.
    """

    pass


class NodeStateError(LRUKitError):
    """Raised when an operation does not apply to the node's current state."""

    pass


class ListCorruptionError(LRUKitError):
    """Raised when OrderedList.validate() finds a broken link invariant."""

    pass


class CacheConsistencyError(LRUKitError):
    """Raised when the cache index and its recency list disagree."""

    pass
