"""
O Runtime Support Library

Runtime data structures backing code generated by the O compiler.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - O syntax or semantics
    - Code generation
    - Element types (every element is an opaque reference)

It provides two containers only:
    - Array: fixed length, bounds enforced, fail-fast on misuse
    - List: append-only singly-linked chain, graceful on empty input

Contract violations terminate the process. See oruntime.fatal.
"""

from oruntime.array import array_get, array_length, array_new, array_set
from oruntime.config import FatalPolicy, RuntimeConfig, configure, get_config, load_config
from oruntime.fatal import FatalCondition, RuntimeAbort
from oruntime.linked_list import (
    list_append,
    list_empty,
    list_head,
    list_replicate,
    list_singleton,
    list_tail,
    list_to_array,
)
from oruntime.model import Array, LinkedList, Node

__version__ = "0.1.0"

__all__ = [
    "Array",
    "LinkedList",
    "Node",
    "array_new",
    "array_length",
    "array_get",
    "array_set",
    "list_empty",
    "list_singleton",
    "list_replicate",
    "list_append",
    "list_head",
    "list_tail",
    "list_to_array",
    "FatalCondition",
    "RuntimeAbort",
    "FatalPolicy",
    "RuntimeConfig",
    "configure",
    "get_config",
    "load_config",
]
