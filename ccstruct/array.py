"""Fixed-size array of slots with optional disposal of its elements."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterator, List, Optional

RemoveFn = Callable[[Any], Any]
CompareFn = Callable[[Any, Any], int]


class Array:
    """A fixed number of slots, each holding ``None`` until it is set."""

    __slots__ = ("_items", "remove_fn")

    def __init__(self, size: int, remove_fn: Optional[RemoveFn] = None) -> None:
        size = operator.index(size)
        if size < 0:
            raise ValueError("array size must not be negative")
        self._items: List[Any] = [None] * size
        self.remove_fn = remove_fn

    def _check(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise IndexError(f"array index {index} out of range")
        return index

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[self._check(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[self._check(index)] = value

    def __iter__(self) -> Iterator[Any]:
        yield from self._items

    def __repr__(self) -> str:
        return f"Array({self._items!r})"

    def compare(self, cmp: CompareFn, i: int, j: int) -> int:
        """Return ``cmp(self[i], self[j])``."""
        return cmp(self[i], self[j])

    def swap(self, i: int, j: int) -> None:
        """Exchange the elements at ``i`` and ``j``."""
        i = self._check(i)
        j = self._check(j)
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def reverse(self, start: int, end: int) -> None:
        """Swap ``(end - start) // 2`` mirrored pairs of the span ``start..end``.

        When ``start`` is greater than ``end`` nothing moves.
        """
        start = self._check(start)
        end = self._check(end)
        if start == end:
            raise ValueError("reverse needs two distinct indices")
        start = min(start, end)
        for offset in range((end - start) // 2):
            self.swap(start + offset, end - offset)

    def copy_index(self, other: "Array", index: int, other_index: int) -> None:
        """Copy ``self[index]`` into ``other[other_index]``."""
        value = self[index]
        other[other_index] = value

    def resize(self, new_size: int) -> None:
        """Grow with empty slots or shrink by dropping trailing slots."""
        new_size = operator.index(new_size)
        if new_size < 0:
            raise ValueError("array size must not be negative")
        current = len(self._items)
        if new_size <= current:
            del self._items[new_size:]
        else:
            self._items.extend([None] * (new_size - current))

    def dispose(self) -> None:
        """Pass every slot to ``remove_fn`` (if any) and empty the array."""
        if self.remove_fn is not None:
            for item in self._items:
                self.remove_fn(item)
        self._items = []