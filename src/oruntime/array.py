"""
Fixed-length arrays.

Bounds contract:
    get/set through a null handle, with a non-integer index, or with an
    index outside [0, length) is fatal. Out-of-bounds access is a defect
    in generated code, never a runtime condition to recover from.

    array_length(None) is the one graceful case: a null Array is the
    canonical empty Array and has length 0.
"""
from __future__ import annotations

from typing import Any, Optional

from oruntime.allocation import allocate_array
from oruntime.fatal import FatalCondition, fatal
from oruntime.model import Array


def array_new(length: int) -> Array:
    """
    Allocate an Array of ``length`` empty slots.

    Negative lengths are clamped to 0.
    """
    if length < 0:
        length = 0
    return allocate_array(length)


def array_length(array: Optional[Array]) -> int:
    if array is None:
        return 0
    return array.length


def _ensure_bounds(array: Optional[Array], index: Any) -> None:
    if array is None:
        fatal(FatalCondition.NULL_ARRAY_ACCESS, f"index {index!r} on null array")
    if not isinstance(index, int) or index < 0 or index >= array.length:
        fatal(
            FatalCondition.INDEX_OUT_OF_BOUNDS,
            f"index {index!r} outside [0, {array.length})",
        )


def array_get(array: Optional[Array], index: int) -> Any:
    _ensure_bounds(array, index)
    return array.elements[index]


def array_set(array: Optional[Array], index: int, value: Any) -> None:
    """
    Store ``value`` at ``index``.

    The displaced reference is dropped, not released; its owner is
    whoever handed it in.
    """
    _ensure_bounds(array, index)
    array.elements[index] = value
