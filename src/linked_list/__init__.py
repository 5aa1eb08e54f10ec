"""Singly linked list of integer nodes.

This module provides the ListNode storage unit and the lock-guarded
LinkedList that owns chains of them.
"""

from src.linked_list.linked_list import LinkedList
from src.linked_list.node import ListNode

__all__ = ["LinkedList", "ListNode"]
