"""
Shared allocation helpers.

Every piece of storage the runtime creates goes through one of these
helpers. Allocation is infallible-or-fatal: callers never see a failed
allocation.
"""
from __future__ import annotations

from typing import Any, List, Optional

from oruntime.fatal import FatalCondition, fatal
from oruntime.model import Array, LinkedList, Node


# Sizes are O Integers, i.e. signed 32-bit
MAX_LENGTH = 2**31 - 1


def allocate_slots(count: int) -> List[Any]:
    """Return ``count`` empty slots, each holding None."""
    if count > MAX_LENGTH:
        fatal(FatalCondition.ALLOCATION_FAILURE, f"cannot allocate {count} slots")
    try:
        return [None] * count
    except (MemoryError, OverflowError):
        fatal(FatalCondition.ALLOCATION_FAILURE, f"cannot allocate {count} slots")


def allocate_array(length: int) -> Array:
    slots = allocate_slots(length)
    try:
        return Array(length=length, elements=slots)
    except MemoryError:
        fatal(FatalCondition.ALLOCATION_FAILURE, "cannot allocate array header")


def allocate_node(value: Any, next: Optional[Node] = None) -> Node:
    try:
        return Node(value=value, next=next)
    except MemoryError:
        fatal(FatalCondition.ALLOCATION_FAILURE, "cannot allocate list node")


def allocate_list(first: Optional[Node] = None) -> LinkedList:
    try:
        return LinkedList(first=first)
    except MemoryError:
        fatal(FatalCondition.ALLOCATION_FAILURE, "cannot allocate list")
