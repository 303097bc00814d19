"""Bounded FIFO queue over a circular Array."""

from __future__ import annotations

from typing import Any, Callable, Optional

from ccstruct.array import Array


class QueueEmptyError(IndexError):
    """Raised when reading from an empty queue."""


class QueueFullError(IndexError):
    """Raised when adding to a full queue."""


class ArrayQueue:
    """A queue holding at most ``capacity`` items, using every slot."""

    def __init__(
        self, capacity: int, remove_fn: Optional[Callable[[Any], Any]] = None
    ) -> None:
        self._array = Array(capacity, remove_fn)
        self._size = 0
        self._front = 0
        self._rear = 0

    def enqueue(self, item: Any) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self._array[self._rear] = item
        self._rear = (self._rear + 1) % len(self._array)
        self._size += 1

    def dequeue(self) -> Any:
        if self._size == 0:
            raise QueueEmptyError("queue is empty")
        item = self._array[self._front]
        self._front = (self._front + 1) % len(self._array)
        self._size -= 1
        return item

    def peek(self) -> Any:
        if self._size == 0:
            raise QueueEmptyError("queue is empty")
        return self._array[self._front]

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size >= len(self._array)

    def __len__(self) -> int:
        return self._size

    def dispose(self) -> None:
        """Release the backing storage, passing each slot to ``remove_fn``."""
        self._array.dispose()
        self._size = self._front = self._rear = 0