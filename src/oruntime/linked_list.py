"""
Singly-linked lists.

Lists are append-only sequences of opaque references. Nodes are immutable
and may be shared between lists:

    L = a -> b -> c
    list_tail(L) = b -> c      (same b and c nodes as L)

Because of that sharing no operation ever edits a node in place. Appending
walks the whole chain from the head, copying it, and links the new node
onto the copy. The walk makes append O(n) in the current length; callers
building long lists should expect quadratic total cost.

Failure semantics:
    Unlike Array, Lists degrade gracefully. head/tail/append/to_array on a
    null or empty list return empty results. Only allocation failure is
    fatal.
"""
from __future__ import annotations

from typing import Any, Optional

from oruntime.allocation import MAX_LENGTH, allocate_list, allocate_node
from oruntime.array import array_new, array_set
from oruntime.fatal import FatalCondition, fatal
from oruntime.model import Array, LinkedList


def list_empty() -> LinkedList:
    return allocate_list()


def list_singleton(value: Any) -> LinkedList:
    return allocate_list(allocate_node(value))


def list_replicate(value: Any, count: int) -> LinkedList:
    """Build a list of ``count`` nodes all holding ``value``."""
    if count <= 0:
        return list_empty()
    if count > MAX_LENGTH:
        fatal(FatalCondition.ALLOCATION_FAILURE, f"cannot allocate {count} list nodes")

    first = None
    for _ in range(count):
        first = allocate_node(value, first)
    return allocate_list(first)


def list_append(lst: Optional[LinkedList], value: Any) -> LinkedList:
    """
    Return a list holding the values of ``lst`` followed by ``value``.

    A null ``lst`` behaves like ``list_singleton(value)``. Neither ``lst``
    nor any list sharing nodes with it is modified.
    """
    if lst is None:
        return list_singleton(value)

    # Full traversal from the head on every call
    prefix = [node.value for node in lst.nodes()]

    first = allocate_node(value)
    for prior in reversed(prefix):
        first = allocate_node(prior, first)
    return allocate_list(first)


def list_head(lst: Optional[LinkedList]) -> Any:
    if lst is None or lst.first is None:
        return None
    return lst.first.value


def list_tail(lst: Optional[LinkedList]) -> LinkedList:
    """
    Return a new list over every node after the first.

    The remaining nodes are shared with ``lst``, not copied.
    """
    if lst is None or lst.first is None:
        return list_empty()
    return allocate_list(lst.first.next)


def list_to_array(lst: Optional[LinkedList]) -> Array:
    if lst is None:
        return array_new(0)

    array = array_new(len(lst))
    for index, value in enumerate(lst):
        array_set(array, index, value)
    return array
