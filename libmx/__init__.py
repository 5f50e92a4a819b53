"""Utility helpers for strings, numbers, byte buffers, sorting, lists and I/O."""

__version__ = "0.1.0"

__all__ = [
    "strings",
    "numbers",
    "memory",
    "sorting",
    "linked_list",
    "output",
    "reading",
    "print_args",
]