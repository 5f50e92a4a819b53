"""Sorting and searching helpers for lists of strings and integers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence, Sequence
from typing import Any, TypeVar

from libmx.strings import strcmp

T = TypeVar("T")

__all__ = ["binary_search", "bubble_sort", "foreach", "quicksort", "quicksort_int"]


def binary_search(arr: Sequence[str], target: str) -> tuple[int, int]:
    """Look for ``target`` in the sorted ``arr``.

    Returns ``(index, steps)`` where ``steps`` is the number of probes made,
    or ``(-1, 0)`` when ``target`` is absent.
    """
    start, end = 0, len(arr) - 1
    steps = 0
    while start <= end:
        steps += 1
        middle = (start + end) // 2
        diff = strcmp(target, arr[middle])
        if diff > 0:
            start = middle + 1
        elif diff < 0:
            end = middle - 1
        else:
            return middle, steps
    return -1, 0


def bubble_sort(arr: MutableSequence[str]) -> int:
    """Sort ``arr`` in place in byte order and return the number of swaps made."""
    swaps = 0
    for unsorted_end in range(len(arr) - 1, 0, -1):
        swapped = False
        for j in range(unsorted_end):
            if strcmp(arr[j], arr[j + 1]) > 0:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swaps += 1
                swapped = True
        if not swapped:
            break
    return swaps


def _quicksort(arr: MutableSequence[T], left: int, right: int, key: Callable[[T], Any]) -> int:
    if left >= right:
        return 0
    if left < 0 or right >= len(arr):
        raise IndexError(f"range [{left}, {right}] is outside a sequence of {len(arr)} items")
    pivot = (right - left) // 2 + left
    swaps = 0
    new_left, new_right = left, right
    while new_left <= new_right:
        pivot_key = key(arr[pivot])
        i = next(k for k in range(left, right + 1) if k == pivot or key(arr[k]) > pivot_key)
        j = next(k for k in range(right, left - 1, -1) if k == pivot or key(arr[k]) < pivot_key)
        new_left, new_right = i, j
        if i == pivot and new_right != pivot:
            pivot = new_right
        elif j == pivot and new_left != pivot:
            pivot = new_left
        if new_left != new_right:
            arr[new_left], arr[new_right] = arr[new_right], arr[new_left]
            swaps += 1
        new_left += 1
        new_right -= 1
    swaps += _quicksort(arr, left, pivot - 1, key)
    swaps += _quicksort(arr, pivot + 1, right, key)
    return swaps


def quicksort(arr: MutableSequence[str], left: int, right: int) -> int:
    """Sort ``arr[left:right + 1]`` in place by string length; return the swap count."""
    return _quicksort(arr, left, right, len)


def quicksort_int(arr: MutableSequence[int], left: int, right: int) -> int:
    """Sort ``arr[left:right + 1]`` in place by value; return the swap count."""
    return _quicksort(arr, left, right, lambda value: value)


def foreach(arr: Iterable[T], func: Callable[[T], Any]) -> None:
    """Call ``func`` on every item of ``arr`` in order."""
    for item in arr:
        func(item)