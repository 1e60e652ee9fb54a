#!/usr/bin/env python3
"""
Demo: Drive the O runtime the way generated code does.

Builds a list, reads it back, converts it to an array, then shows the
builtin dispatch used by the compiler.
"""

import logging

from oruntime import (
    array_get,
    array_length,
    array_new,
    array_set,
    list_append,
    list_empty,
    list_head,
    list_tail,
    list_to_array,
)
from oruntime.builtins import call_method, construct_list
from oruntime.logging_config import setup_logging


def show(label, array):
    values = [array_get(array, i) for i in range(array_length(array))]
    print(f"{label:<28} {values}")


def main():
    setup_logging(logging.INFO)

    print("=" * 80)
    print("O RUNTIME DEMO")
    print("=" * 80)

    lst = list_append(list_append(list_append(list_empty(), "a"), "b"), "c")
    show("toArray(L):", list_to_array(lst))
    print(f"{'head(L):':<28} {list_head(lst)!r}")
    show("toArray(tail(L)):", list_to_array(list_tail(lst)))

    array = array_new(3)
    array_set(array, 1, "middle")
    show("array after set(1):", array)
    print(f"{'length(null array):':<28} {array_length(None)}")

    print("\nBuiltin dispatch:")
    print("-" * 80)
    replicated = construct_list("x", 4)
    show("List(x, 4).toArray():", call_method(replicated, "toArray"))
    chained = call_method(call_method(array_new(2), "set", 0, 1), "set", 1, 2)
    show("Array(2).set(0,1).set(1,2):", chained)

    print("\n" + "=" * 80)
    print("Out-of-bounds access aborts the process, e.g. array_get(array, 3).")
    print("=" * 80)


if __name__ == "__main__":
    main()
