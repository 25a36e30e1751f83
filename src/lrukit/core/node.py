"""Arena node and locator types for the recency list."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class NodeState(Enum):
    """Lifecycle of an arena slot."""

    LINKED = "linked"
    DETACHED = "detached"
    FREE = "free"


@dataclass
class Node:
    """A single list entry.

    ``prev`` and ``next`` are arena slot indices rather than object
    references, so neither direction owns its neighbour.
    """

    value: Any = None
    prev: Optional[int] = None
    next: Optional[int] = None
    generation: int = 0
    state: NodeState = NodeState.DETACHED


@dataclass(frozen=True)
class Locator:
    """Non-owning handle to a node, valid while its slot keeps the same generation."""

    index: int
    generation: int
