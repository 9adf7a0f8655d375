"""Panic handling and merge sort utilities."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, MutableSequence
from typing import Any, TypeVar

T = TypeVar("T")


class PanicError(SystemExit):
    """Raised by the default panic handler; exits with a failure status."""

    def __init__(self, message: str) -> None:
        super().__init__(1)
        self.message = message

    def __str__(self) -> str:
        return self.message


def _default_panic(message: str) -> None:
    sys.stderr.write(message)
    sys.stderr.flush()
    if os.environ.get("EF_DUMPCORE"):
        os.abort()
    raise PanicError(message)


_handler: Callable[[str], Any] = _default_panic


def set_panic(handler: Callable[[str], Any] | None) -> Callable[[str], Any]:
    """Install a panic handler (None restores the default); return the old one."""
    global _handler
    previous = _handler
    _handler = handler if handler is not None else _default_panic
    return previous


def panic(message: str) -> None:
    """Report a fatal condition through the current panic handler."""
    _handler(message)


def _merge_sort(items: list[T], comparefn: Callable[[T, T], int]) -> list[T]:
    if len(items) < 2:
        return items
    mid = len(items) // 2
    left = _merge_sort(items[:mid], comparefn)
    right = _merge_sort(items[mid:], comparefn)
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        # Only a strictly smaller left element is taken first.
        if comparefn(left[i], right[j]) < 0:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def mgsort(data: MutableSequence[T], comparefn: Callable[[T, T], int]) -> None:
    """Sort data in place with a merge sort driven by a three-way comparison."""
    data[:] = _merge_sort(list(data), comparefn)