"""Circular doubly linked list with a sentinel root node."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

RemoveFn = Callable[[Any], Any]
CompareFn = Callable[[Any, Any], int]


class ListEmptyError(IndexError):
    """Raised when reading from or removing out of an empty list."""


class ListNode:
    """One link of a list, carrying a single data item."""

    __slots__ = ("data", "prev", "next")

    def __init__(self, data: Any = None) -> None:
        self.data = data
        self.prev: Optional[ListNode] = None
        self.next: Optional[ListNode] = None

    def __repr__(self) -> str:
        return f"ListNode({self.data!r})"


def _link(node: ListNode, prev: ListNode, nxt: ListNode) -> None:
    nxt.prev = node
    node.next = nxt
    node.prev = prev
    prev.next = node


def _unlink(node: ListNode) -> None:
    node.prev.next = node.next
    node.next.prev = node.prev
    node.prev = None
    node.next = None


class LinkedList:
    """A doubly linked list; ``root`` is the sentinel that closes the ring."""

    def __init__(self, remove_fn: Optional[RemoveFn] = None) -> None:
        self.root = ListNode()
        self.remove_fn = remove_fn
        self.size = 0
        self._reset()

    def _reset(self) -> None:
        """Make the list empty without touching the nodes it held."""
        self.root.prev = self.root
        self.root.next = self.root
        self.size = 0

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.data

    def __reversed__(self) -> Iterator[Any]:
        for node in self.nodes(reverse=True):
            yield node.data

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def nodes(self, reverse: bool = False) -> Iterator[ListNode]:
        """Yield the nodes in order; the yielded node may be removed safely."""
        node = self.root.prev if reverse else self.root.next
        while node is not self.root:
            following = node.prev if reverse else node.next
            yield node
            node = following

    def is_empty(self) -> bool:
        return self.root.next is self.root

    def insert_head(self, data: Any) -> ListNode:
        """Put ``data`` at the front and return its node."""
        node = ListNode(data)
        _link(node, self.root, self.root.next)
        self.size += 1
        return node

    def insert_tail(self, data: Any) -> ListNode:
        """Put ``data`` at the back and return its node."""
        node = ListNode(data)
        _link(node, self.root.prev, self.root)
        self.size += 1
        return node

    def insert_node_head(self, node: ListNode) -> None:
        """Link an existing node at the front."""
        if node is None:
            raise TypeError("a node is required")
        _link(node, self.root, self.root.next)
        self.size += 1

    def insert_node_tail(self, node: ListNode) -> None:
        """Link an existing node at the back."""
        if node is None:
            raise TypeError("a node is required")
        _link(node, self.root.prev, self.root)
        self.size += 1

    def insert_sorted(self, data: Any, cmp: CompareFn) -> ListNode:
        """Insert after the first element for which ``cmp(element, data) > 0``.

        If no element compares greater, ``data`` goes to the back.
        """
        if cmp is None:
            raise TypeError("a comparison function is required")
        for node in self.nodes():
            if cmp(node.data, data) > 0:
                new = ListNode(data)
                _link(new, node, node.next)
                self.size += 1
                return new
        return self.insert_tail(data)

    def remove_head(self) -> Any:
        """Unlink the first node and return its data."""
        if self.is_empty():
            raise ListEmptyError("list is empty")
        node = self.root.next
        _unlink(node)
        self.size -= 1
        return node.data

    def remove_tail(self) -> Any:
        """Unlink the last node and return its data."""
        if self.is_empty():
            raise ListEmptyError("list is empty")
        node = self.root.prev
        _unlink(node)
        self.size -= 1
        return node.data

    def remove_node(self, node: ListNode) -> Any:
        """Unlink ``node``, which must belong to this list, and return its data."""
        if node is None:
            raise TypeError("a node is required")
        if not any(candidate is node for candidate in self.nodes()):
            raise ValueError("node is not in this list")
        _unlink(node)
        self.size -= 1
        return node.data

    def head(self) -> Any:
        if self.is_empty():
            raise ListEmptyError("list is empty")
        return self.root.next.data

    def tail(self) -> Any:
        if self.is_empty():
            raise ListEmptyError("list is empty")
        return self.root.prev.data

    def visit(self, fn: Optional[Callable[[Any], Any]], forward: bool = True) -> None:
        """Call ``fn`` on each element, front to back or back to front."""
        if fn is None:
            return
        for data in (self if forward else reversed(self)):
            fn(data)

    def destroy(self) -> None:
        """Pass every element to ``remove_fn`` (if any) and empty the list."""
        for node in self.nodes():
            if self.remove_fn is not None:
                self.remove_fn(node.data)
            node.data = None
            _unlink(node)
            self.size -= 1
        self._reset()