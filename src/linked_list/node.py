"""Node type stored in a singly linked list."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.linked_list.linked_list import LinkedList


@dataclass(eq=False)
class ListNode:
    """A single integer payload plus a link to the next node.

    A node belongs to at most one list at a time. Inserting it into a list
    transfers ownership to that list; removing it hands the node back with
    ``next`` cleared and no owner, so it can be inserted again.

    Attributes:
        data: Integer payload
        next: Following node in the chain, or None at the tail
        owner: List the node is currently linked into, or None
    """

    data: int
    next: "ListNode | None" = field(default=None, repr=False)
    owner: "LinkedList | None" = field(default=None, repr=False)

    @property
    def is_detached(self) -> bool:
        """True if the node is free to be inserted into a list."""
        return self.owner is None and self.next is None

    def matches(self, other: "ListNode") -> bool:
        """Whether ``other`` is this node or carries an equal payload."""
        return self is other or self.data == other.data
