"""Singly linked list node type and list algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A singly linked list node; nodes compare by identity."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator["ListNode"]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list in order."""
    return [node.val for node in head] if head is not None else []


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the n-th node from the end; an out-of-range ``n`` leaves the list as is."""
    if head is None:
        return None
    nodes = list(head)
    index = len(nodes) - n
    if index == 0:
        return head.next
    if 0 < index < len(nodes):
        nodes[index - 1].next = nodes[index].next
    return head