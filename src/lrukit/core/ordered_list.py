"""
Arena-backed doubly linked list used as the recency order of the LRU cache.

Nodes live in a flat arena owned by the list. ``prev``/``next`` links and the
locators handed to callers are plain slot indices, so there is no ownership
cycle between the forward and backward chains and nothing outside the list can
keep a node alive. Freed slots go on a free list and get their generation
bumped, which turns every outstanding locator for them stale.
"""

from typing import Any, Generic, Iterator, List, Optional, TypeVar

from .exceptions import ListCorruptionError, NodeStateError, StaleLocatorError
from .node import Locator, Node, NodeState

T = TypeVar("T")


class OrderedList(Generic[T]):
    """Double-ended sequence with O(1) removal and relocation of a known node."""

    def __init__(self):
        self._nodes: List[Node] = []
        self._free: List[int] = []
        self._head: Optional[int] = None
        self._tail: Optional[int] = None
        self._count = 0
        # bumped on every structural change, checked by live iterators
        self._version = 0

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __iter__(self) -> "ListIterator[T]":
        return self.iter()

    def __reversed__(self) -> Iterator[T]:
        return reversed(self.iter())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    # ------------------------------------------------------------------ ends

    def push_front(self, value: T) -> Locator:
        """Insert ``value`` at the front and return a locator to its node."""
        index = self._allocate(value)
        self._link_front(index)
        return self._locator(index)

    def push_back(self, value: T) -> Locator:
        """Insert ``value`` at the back and return a locator to its node."""
        index = self._allocate(value)
        self._link_back(index)
        return self._locator(index)

    def pop_front(self) -> Optional[T]:
        """Remove and return the front value, or None if the list is empty."""
        if self._head is None:
            return None
        index = self._head
        self._unlink(index)
        return self._release(index)

    def pop_back(self) -> Optional[T]:
        """Remove and return the back value, or None if the list is empty."""
        if self._tail is None:
            return None
        index = self._tail
        self._unlink(index)
        return self._release(index)

    def front(self) -> Optional[T]:
        return None if self._head is None else self._nodes[self._head].value

    def back(self) -> Optional[T]:
        return None if self._tail is None else self._nodes[self._tail].value

    def get_head_locator(self) -> Optional[Locator]:
        return None if self._head is None else self._locator(self._head)

    def get_tail_locator(self) -> Optional[Locator]:
        """Locator to the current tail, used to index a freshly pushed entry."""
        return None if self._tail is None else self._locator(self._tail)

    # ------------------------------------------------------------ known nodes

    def remove_node(self, locator: Locator) -> T:
        """Unlink a node from anywhere in the chain, free it and return its value.

        Raises:
            StaleLocatorError: If the locator no longer resolves.
            NodeStateError: If the node is not currently linked.
        """
        index = self._resolve_linked(locator)
        self._unlink(index)
        return self._release(index)

    def detach_node(self, locator: Locator) -> None:
        """Unlink a node but keep its slot, value and locator alive."""
        index = self._resolve_linked(locator)
        self._unlink(index)

    def make_node(self, value: T) -> Locator:
        """Allocate a detached node that can later be linked with push_node_back."""
        return self._locator(self._allocate(value))

    def push_node_back(self, locator: Locator) -> None:
        """Link an already constructed, detached node at the back."""
        index = self._resolve(locator)
        if self._nodes[index].state is not NodeState.DETACHED:
            raise NodeStateError(f"Cannot push {locator}: node is already linked")
        self._link_back(index)

    def move_node_to_back(self, locator: Locator) -> None:
        """Relocate a linked node to the back without reallocating it."""
        if self._resolve_linked(locator) == self._tail:
            return
        self.detach_node(locator)
        self.push_node_back(locator)

    def get_value(self, locator: Locator) -> T:
        return self._nodes[self._resolve(locator)].value

    def set_value(self, locator: Locator, value: T) -> None:
        self._nodes[self._resolve(locator)].value = value

    # ----------------------------------------------------------------- misc

    def iter(self) -> "ListIterator[T]":
        """Return an independent bidirectional cursor over the current values."""
        return ListIterator(self)

    def clear(self) -> None:
        """Drop every node, one pop at a time, invalidating all locators.

        The arena itself is kept so slot generations keep increasing and old
        locators can never resolve to a reused slot.
        """
        while self._count:
            self.pop_back()
        for index, node in enumerate(self._nodes):
            if node.state is NodeState.DETACHED:
                self._release(index)
        self._version += 1

    def validate(self) -> None:
        """Walk the chain and check every link invariant.

        Raises:
            ListCorruptionError: On the first violated invariant.
        """
        if (self._head is None) != (self._tail is None):
            raise ListCorruptionError(
                f"head={self._head} and tail={self._tail} must both be set or both be empty"
            )
        if (self._head is None) != (self._count == 0):
            raise ListCorruptionError(
                f"count={self._count} disagrees with head={self._head}"
            )

        seen = 0
        prev: Optional[int] = None
        index = self._head
        while index is not None:
            if seen >= self._count:
                raise ListCorruptionError(
                    f"chain is longer than count={self._count} (cycle at slot {index}?)"
                )
            node = self._nodes[index]
            if node.state is not NodeState.LINKED:
                raise ListCorruptionError(
                    f"slot {index} is reachable from head but is {node.state.value}"
                )
            if node.prev != prev:
                raise ListCorruptionError(
                    f"slot {index} points back to {node.prev}, expected {prev}"
                )
            prev = index
            index = node.next
            seen += 1

        if seen != self._count:
            raise ListCorruptionError(f"walked {seen} nodes, count is {self._count}")
        if prev != self._tail:
            raise ListCorruptionError(f"chain ends at {prev}, tail is {self._tail}")

        linked = sum(1 for n in self._nodes if n.state is NodeState.LINKED)
        if linked != self._count:
            raise ListCorruptionError(
                f"{linked} slots are marked linked, count is {self._count}"
            )
        free = {i for i, n in enumerate(self._nodes) if n.state is NodeState.FREE}
        if free != set(self._free) or len(free) != len(self._free):
            raise ListCorruptionError("free list does not match freed slots")

    # -------------------------------------------------------------- internals

    def _locator(self, index: int) -> Locator:
        return Locator(index, self._nodes[index].generation)

    def _resolve(self, locator: Locator) -> int:
        index = locator.index
        if not 0 <= index < len(self._nodes):
            raise StaleLocatorError(f"{locator} does not belong to this list")
        node = self._nodes[index]
        if node.state is NodeState.FREE or node.generation != locator.generation:
            raise StaleLocatorError(
                f"{locator} is stale: slot is at generation {node.generation}"
            )
        return index

    def _resolve_linked(self, locator: Locator) -> int:
        index = self._resolve(locator)
        if self._nodes[index].state is not NodeState.LINKED:
            raise NodeStateError(f"{locator} refers to a node that is not linked")
        return index

    def _allocate(self, value: Any) -> int:
        if self._free:
            index = self._free.pop()
            node = self._nodes[index]
            node.value = value
            node.state = NodeState.DETACHED
        else:
            index = len(self._nodes)
            self._nodes.append(Node(value=value))
        return index

    def _release(self, index: int) -> Any:
        node = self._nodes[index]
        value = node.value
        node.value = None
        node.prev = node.next = None
        node.generation += 1
        node.state = NodeState.FREE
        self._free.append(index)
        return value

    def _link_front(self, index: int) -> None:
        node = self._nodes[index]
        node.prev = None
        node.next = self._head
        if self._head is None:
            self._tail = index
        else:
            self._nodes[self._head].prev = index
        self._head = index
        node.state = NodeState.LINKED
        self._count += 1
        self._version += 1

    def _link_back(self, index: int) -> None:
        node = self._nodes[index]
        node.next = None
        node.prev = self._tail
        if self._tail is None:
            self._head = index
        else:
            self._nodes[self._tail].next = index
        self._tail = index
        node.state = NodeState.LINKED
        self._count += 1
        self._version += 1

    def _unlink(self, index: int) -> None:
        node = self._nodes[index]
        prev, nxt = node.prev, node.next
        if prev is None:
            self._head = nxt
        else:
            self._nodes[prev].next = nxt
        if nxt is None:
            self._tail = prev
        else:
            self._nodes[nxt].prev = prev
        node.prev = node.next = None
        node.state = NodeState.DETACHED
        self._count -= 1
        self._version += 1


class ListIterator(Generic[T]):
    """Cursor pair over an OrderedList.

    ``next()`` advances from the front and ``next_back()`` from the back. The
    two ends are independent until they meet, after which both are exhausted.
    Any structural change to the list invalidates the iterator.
    """

    def __init__(self, owner: OrderedList):
        self._owner = owner
        self._version = owner._version
        self._front = owner._head
        self._back = owner._tail
        self._remaining = owner._count

    def __iter__(self) -> "ListIterator[T]":
        return self

    def __next__(self) -> T:
        self._check_version()
        if not self._remaining:
            raise StopIteration
        node = self._owner._nodes[self._front]
        self._front = node.next
        self._remaining -= 1
        return node.value

    def next_back(self) -> T:
        """Return the next value from the back end.

        Raises:
            StopIteration: When the cursors have met.
        """
        self._check_version()
        if not self._remaining:
            raise StopIteration
        node = self._owner._nodes[self._back]
        self._back = node.prev
        self._remaining -= 1
        return node.value

    def __reversed__(self) -> Iterator[T]:
        while self._remaining:
            yield self.next_back()

    def __length_hint__(self) -> int:
        return self._remaining

    def _check_version(self) -> None:
        if self._owner._version != self._version:
            raise RuntimeError("OrderedList mutated during iteration")
