"""Singly linked list of integer nodes with positional insert and remove.

Every public method runs under a per-instance re-entrant lock, so concurrent
callers on the same list never observe a half-linked chain or a length that
disagrees with the chain. There is no atomicity across separate calls.
"""

import threading
from collections.abc import Iterable, Iterator

import structlog

from src.errors import EmptyCollectionError, NodeOwnershipError, NotFoundError, OutOfRangeError
from src.linked_list.node import ListNode

logger = structlog.get_logger(__name__)


class LinkedList:
    """Mutable ordered sequence of ListNode objects.

    Invariants (held whenever the lock is free):
        - ``length`` equals the number of nodes reachable from ``head``
        - the chain is acyclic and no node appears twice
        - ``head is None`` iff ``length == 0``

    Head insertion and removal are O(1); tail and positional operations walk
    the chain and are O(n).

    Example:
        >>> lst = LinkedList()
        >>> for value in (1, 2, 3):
        ...     lst.insert_at_end(ListNode(value))
        >>> lst.remove_from_end().data
        3
        >>> str(lst)
        '[1,2]'
    """

    def __init__(self) -> None:
        """Initialize an empty list."""
        self._head: ListNode | None = None
        self._length = 0
        self._lock = threading.RLock()

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "LinkedList":
        """Build a list by appending a new node for each value in order."""
        lst = cls()
        for value in values:
            lst.insert_at_end(ListNode(value))
        return lst

    @staticmethod
    def list_length(head_node: ListNode | None) -> int:
        """Count nodes by walking a chain from ``head_node``."""
        length = 0
        current = head_node
        while current is not None:
            length += 1
            current = current.next
        return length

    @property
    def head(self) -> ListNode | None:
        """Current head node, or None if the list is empty."""
        with self._lock:
            return self._head

    def get_head(self) -> ListNode | None:
        return self.head

    @property
    def length(self) -> int:
        """Cached number of nodes."""
        with self._lock:
            return self._length

    def __len__(self) -> int:
        return self.length

    # Insertion

    def insert_at_begin(self, node: ListNode) -> None:
        """Make ``node`` the new head.

        Raises:
            NodeOwnershipError: If the node is still linked into a list
        """
        with self._lock:
            self._claim(node)
            node.next = self._head
            self._head = node
            self._length += 1

    def insert_at_end(self, node: ListNode) -> None:
        """Append ``node`` after the current tail.

        Raises:
            NodeOwnershipError: If the node is still linked into a list
        """
        with self._lock:
            self._claim(node)
            if self._head is None:
                self._head = node
            else:
                self._node_at(self._length - 1).next = node
            self._length += 1

    def insert_at_given_position(self, value: int, position: int) -> ListNode:
        """Insert a new node holding ``value`` so that it sits at ``position``.

        The position is clamped to ``[0, length]``: negative positions insert
        at the head, positions past the end append at the tail.

        Args:
            value: Payload for the new node
            position: Zero-based target index

        Returns:
            The newly inserted node
        """
        with self._lock:
            position = _clamp(position, 0, self._length)
            node = ListNode(value)
            self._claim(node)

            if position == 0:
                node.next = self._head
                self._head = node
            else:
                previous = self._node_at(position - 1)
                node.next = previous.next
                previous.next = node

            self._length += 1
            logger.debug("node_inserted", value=value, position=position, length=self._length)
            return node

    # Removal

    def remove_from_begin(self) -> ListNode | None:
        """Detach and return the head node, or None if the list is empty."""
        with self._lock:
            node = self._head
            if node is None:
                return None
            self._head = node.next
            self._length -= 1
            self._release(node)
            return node

    def remove_from_end(self) -> ListNode | None:
        """Detach and return the tail node, or None if the list is empty."""
        with self._lock:
            if self._head is None:
                return None
            if self._head.next is None:
                node = self._head
                self._head = None
            else:
                previous = self._node_at(self._length - 2)
                node = previous.next
                previous.next = None
            self._length -= 1
            self._release(node)
            return node

    def remove_matched(self, node: ListNode) -> ListNode | None:
        """Remove the first node that is ``node`` or carries an equal payload.

        Scans from the head. The removed node is returned detached, which
        may be a different object than ``node`` when only the payloads match.

        Returns:
            The removed node, or None if nothing matched
        """
        with self._lock:
            previous: ListNode | None = None
            current = self._head
            while current is not None:
                if current.matches(node):
                    if previous is None:
                        self._head = current.next
                    else:
                        previous.next = current.next
                    self._length -= 1
                    self._release(current)
                    return current
                previous = current
                current = current.next

            logger.debug("remove_matched_no_match", value=node.data)
            return None

    def remove_at_given_position(self, position: int) -> ListNode | None:
        """Remove and return the node at ``position``.

        The position is clamped to ``[0, length - 1]``.

        Returns:
            The removed node, or None if the list is empty
        """
        with self._lock:
            if self._head is None:
                return None

            position = _clamp(position, 0, self._length - 1)
            if position == 0:
                return self.remove_from_begin()

            previous = self._node_at(position - 1)
            node = previous.next
            previous.next = node.next
            self._length -= 1
            self._release(node)
            logger.debug("node_removed", value=node.data, position=position, length=self._length)
            return node

    def clear_list(self) -> None:
        """Release every node and reset the list to empty."""
        with self._lock:
            current = self._head
            while current is not None:
                following = current.next
                self._release(current)
                current = following
            self._head = None
            self._length = 0

    # Lookup

    def get_position(self, value: int) -> int | None:
        """Zero-based index of the first node holding ``value``, or None."""
        with self._lock:
            for position, data in enumerate(self._values()):
                if data == value:
                    return position
            return None

    def index(self, value: int) -> int:
        """Like get_position, but raise if ``value`` is absent.

        Raises:
            NotFoundError: If no node holds ``value``
        """
        position = self.get_position(value)
        if position is None:
            msg = f"{value} is not in the list"
            raise NotFoundError(msg)
        return position

    def value_at(self, position: int) -> int:
        """Payload at an exact index, without clamping.

        Raises:
            OutOfRangeError: If position is outside ``[0, length)``
        """
        with self._lock:
            if not 0 <= position < self._length:
                msg = f"Position {position} is not between 0 and {self._length - 1}"
                raise OutOfRangeError(msg, value=position, bound=self._length)
            return self._node_at(position).data

    def first(self) -> int:
        """Payload of the head node.

        Raises:
            EmptyCollectionError: If the list is empty
        """
        with self._lock:
            if self._head is None:
                msg = "first() called on an empty list"
                raise EmptyCollectionError(msg)
            return self._head.data

    def last(self) -> int:
        """Payload of the tail node.

        Raises:
            EmptyCollectionError: If the list is empty
        """
        with self._lock:
            if self._head is None:
                msg = "last() called on an empty list"
                raise EmptyCollectionError(msg)
            return self._node_at(self._length - 1).data

    def traverse(self) -> list[int]:
        """Values from head to tail."""
        with self._lock:
            values = list(self._values())
        logger.debug("list_traversed", values=values, length=len(values))
        return values

    def __iter__(self) -> Iterator[int]:
        with self._lock:
            return iter(list(self._values()))

    def __contains__(self, value: object) -> bool:
        with self._lock:
            return any(data == value for data in self._values())

    def __str__(self) -> str:
        with self._lock:
            return "[" + ",".join(str(data) for data in self._values()) + "]"

    def __repr__(self) -> str:
        return f"LinkedList({self})"

    # Internal helpers, called with the lock held

    def _values(self) -> Iterator[int]:
        current = self._head
        while current is not None:
            yield current.data
            current = current.next

    def _node_at(self, position: int) -> ListNode:
        node = self._head
        for _ in range(position):
            node = node.next
        return node

    def _claim(self, node: ListNode) -> None:
        if not node.is_detached:
            msg = f"Node with data {node.data} is already linked into a list"
            logger.warning("node_ownership_conflict", value=node.data)
            raise NodeOwnershipError(msg)
        node.owner = self

    @staticmethod
    def _release(node: ListNode) -> None:
        node.next = None
        node.owner = None


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))
