"""Ring buffer queue that keeps one slot free to tell full from empty."""

from __future__ import annotations

from typing import Any, Callable, Optional

from ccstruct.array import Array
from ccstruct.array_queue import QueueEmptyError, QueueFullError


class ArrayRingQueue:
    """A ring queue of ``slots`` slots holding at most ``slots - 1`` items."""

    def __init__(
        self, slots: int, remove_fn: Optional[Callable[[Any], Any]] = None
    ) -> None:
        if slots < 1:
            raise ValueError("a ring queue needs at least one slot")
        self._slots = slots
        self._array = Array(slots, remove_fn)
        self._write = 0
        self._read = 0

    def enqueue(self, item: Any) -> None:
        if self.is_full():
            raise QueueFullError("ring queue is full")
        self._array[self._write] = item
        self._write = (self._write + 1) % self._slots

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("ring queue is empty")
        item = self._array[self._read]
        self._read = (self._read + 1) % self._slots
        return item

    def peek(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("ring queue is empty")
        return self._array[self._read]

    def is_empty(self) -> bool:
        return self._read == self._write

    def is_full(self) -> bool:
        return (self._write + 1) % self._slots == self._read

    def __len__(self) -> int:
        return (self._write - self._read) % self._slots

    def capacity(self) -> int:
        """Largest number of items the queue can hold."""
        return self._slots - 1

    def space(self) -> int:
        """Number of items that can still be enqueued."""
        return self.capacity() - len(self)

    def dispose(self) -> None:
        """Release the backing storage, passing each slot to ``remove_fn``."""
        self._array.dispose()
        self._array.resize(self._slots)
        self._write = self._read = 0