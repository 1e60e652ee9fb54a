"""
Core Runtime Objects

Defines the data structures handed to and from generated O code:
    - Array (fixed-length indexed storage)
    - Node (one cell of a singly-linked chain)
    - LinkedList (handle on the first node of a chain)

ARCHITECTURAL RULE:
    These objects:
        - Hold opaque element references, never interpret them
        - Contain structure only (operations live in array / linked_list)
        - Are created exclusively through the allocation helpers

Elements are borrowed from the caller. Nothing here copies, inspects or
releases them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional


@dataclass(frozen=True)
class Array:
    """
    A fixed-length container of opaque references.

    Properties:
        length:
            Number of slots. Fixed at creation, never negative.

        elements:
            Backing slots, ``length`` entries, index range [0, length).
            Unwritten slots hold None (the empty marker).

    IMPORTANT:
        The handle is frozen, so ``length`` cannot be rebound. The slot
        list itself is only ever written through ``array_set``.
    """

    length: int
    elements: List[Any] = field(repr=False)

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[Any]:
        return iter(self.elements)


@dataclass(frozen=True, eq=False)
class Node:
    """
    One cell of a list chain.

    Nodes never change after creation. Several lists may reference the
    same node (see ``list_tail``), so an in-place edit would leak into
    every one of them.
    """

    value: Any
    next: Optional[Node] = field(default=None, repr=False)


@dataclass(frozen=True)
class LinkedList:
    """
    A handle on a singly-linked chain of nodes.

    Properties:
        first:
            The first node, or None when the list has no nodes.

    The chain is assumed to be acyclic. This is not checked.
    """

    first: Optional[Node] = None

    def nodes(self) -> Iterator[Node]:
        node = self.first
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.value

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())
