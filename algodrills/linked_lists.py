"""Singly linked list exercises: digit arithmetic, merging and node removal."""

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: "Optional[ListNode]" = None

    def __repr__(self):
        return f"ListNode({list_values(self)!r})"


def _nodes(head) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def build_list(values):
    """Build a linked list holding values in order; return its head or None."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head):
    """Return the values of the list starting at head."""
    return [node.val for node in _nodes(head)]


def _length(head):
    return sum(1 for _ in _nodes(head))


def add_two_numbers(l1, l2):
    """Add two numbers stored as digit lists, least significant digit first.

    The sum is written into the longer list (the second on a tie), which
    is extended by one node when a carry is left over; its head is returned.
    """
    longer, shorter = (l1, l2) if _length(l1) > _length(l2) else (l2, l1)
    other = shorter
    carry = 0
    for node in _nodes(longer):
        total = node.val + carry + (other.val if other is not None else 0)
        carry, node.val = divmod(total, 10)
        if carry and node.next is None:
            node.next = ListNode(carry)
            break
        other = other.next if other is not None else None
    return longer


def merge_two_lists(list1, list2):
    """Splice two sorted lists into one; on equal values list2's node comes first."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list2 if list1 is None else list1
    return dummy.next


def delete_node(node):
    """Remove node from its list by taking over the value and link of its successor."""
    if node.next is None:
        raise ValueError("cannot delete the tail node this way")
    node.val = node.next.val
    node.next = node.next.next


def double_it(head):
    """Double a number stored as digits, most significant first, in place.

    Returns the head, which is a new node when the number gains a digit.
    """
    carry = 0
    for node in reversed(list(_nodes(head))):
        carry, node.val = divmod(node.val * 2 + carry, 10)
    if carry:
        return ListNode(carry, head)
    return head