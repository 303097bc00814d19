"""Bounded LIFO stack backed by an Array."""

from __future__ import annotations

from typing import Any, Callable, Optional

from ccstruct.array import Array


class StackEmptyError(IndexError):
    """Raised when reading from an empty stack."""


class StackFullError(IndexError):
    """Raised when pushing onto a full stack."""


class ArrayStack:
    """A stack holding at most ``capacity`` items."""

    def __init__(
        self, capacity: int, remove_fn: Optional[Callable[[Any], Any]] = None
    ) -> None:
        self._array = Array(capacity, remove_fn)
        self._top = 0

    def push(self, item: Any) -> None:
        if self._top >= len(self._array):
            raise StackFullError("stack is full")
        self._array[self._top] = item
        self._top += 1

    def pop(self) -> Any:
        if self._top == 0:
            raise StackEmptyError("stack is empty")
        self._top -= 1
        return self._array[self._top]

    def peek(self) -> Any:
        if self._top == 0:
            raise StackEmptyError("stack is empty")
        return self._array[self._top - 1]

    def __len__(self) -> int:
        return self._top

    def space(self) -> int:
        """Number of items that can still be pushed."""
        return len(self._array) - self._top

    def dispose(self) -> None:
        """Release the backing storage, passing each slot to ``remove_fn``."""
        self._array.dispose()
        self._top = 0