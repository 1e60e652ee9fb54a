"""
O builtin methods and constructors.

Generated O code reaches the runtime through a small, fixed vocabulary:

    Array[T](n)           -> array_new(n)
    a.Length()            -> array_length(a)
    a.get(i)              -> array_get(a, i)
    a.set(i, v)           -> array_set(a, i, v), evaluates to a

    List[T]()             -> list_empty()
    List[T](v)            -> list_singleton(v)
    List[T](v, n)         -> list_replicate(v, n)
    l.append(v)           -> list_append(l, v)
    l.head()              -> list_head(l)
    l.tail()              -> list_tail(l)
    l.toArray()           -> list_to_array(l)

This module maps those names and arities onto the runtime operations so
interpreters and test harnesses can execute O calls directly.

A name or arity outside the vocabulary raises UnsupportedBuiltinError.
That is a lookup failure on the caller's side and is unrelated to the
fatal runtime contract.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Tuple

from oruntime.array import array_get, array_length, array_new, array_set
from oruntime.linked_list import (
    list_append,
    list_empty,
    list_head,
    list_replicate,
    list_singleton,
    list_tail,
    list_to_array,
)
from oruntime.model import Array, LinkedList


class UnsupportedBuiltinError(LookupError):
    """Raised when no builtin matches a method name and arity."""


def _array_set_chained(array: Optional[Array], index: int, value: Any) -> Optional[Array]:
    array_set(array, index, value)
    return array


# (method name, argument count) -> operation taking the receiver first
ARRAY_METHODS: Dict[Tuple[str, int], Callable[..., Any]] = {
    ("Length", 0): array_length,
    ("get", 1): array_get,
    ("set", 2): _array_set_chained,
}

LIST_METHODS: Dict[Tuple[str, int], Callable[..., Any]] = {
    ("append", 1): list_append,
    ("head", 0): list_head,
    ("tail", 0): list_tail,
    ("toArray", 0): list_to_array,
}

LIST_CONSTRUCTORS: Dict[int, Callable[..., LinkedList]] = {
    0: list_empty,
    1: list_singleton,
    2: list_replicate,
}


def _dispatch(table, kind: str, receiver: Any, method_name: str, arguments) -> Any:
    operation = table.get((method_name, len(arguments)))
    if operation is None:
        raise UnsupportedBuiltinError(
            f"{kind} has no builtin '{method_name}' taking {len(arguments)} argument(s)"
        )
    return operation(receiver, *arguments)


def call_array_method(receiver: Optional[Array], method_name: str, *arguments: Any) -> Any:
    return _dispatch(ARRAY_METHODS, "Array", receiver, method_name, arguments)


def call_list_method(receiver: Optional[LinkedList], method_name: str, *arguments: Any) -> Any:
    return _dispatch(LIST_METHODS, "List", receiver, method_name, arguments)


def call_method(receiver: Any, method_name: str, *arguments: Any) -> Any:
    """
    Invoke a builtin, choosing the table from the receiver's type.

    A null receiver carries no type, so it cannot be dispatched here. Use
    call_array_method / call_list_method when the static type is known.
    """
    if isinstance(receiver, Array):
        return call_array_method(receiver, method_name, *arguments)
    if isinstance(receiver, LinkedList):
        return call_list_method(receiver, method_name, *arguments)
    raise UnsupportedBuiltinError(
        f"No builtin methods for receiver of type {type(receiver).__name__}"
    )


def construct_array(*arguments: Any) -> Array:
    if len(arguments) != 1:
        raise UnsupportedBuiltinError(
            f"Array constructor takes 1 argument, got {len(arguments)}"
        )
    return array_new(arguments[0])


def construct_list(*arguments: Any) -> LinkedList:
    constructor = LIST_CONSTRUCTORS.get(len(arguments))
    if constructor is None:
        raise UnsupportedBuiltinError(
            f"Unsupported List constructor arity: {len(arguments)}"
        )
    return constructor(*arguments)
