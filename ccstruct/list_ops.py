"""Operations that move nodes between linked lists: concatenation, merging,
splitting, copying and swapping."""

from __future__ import annotations

from typing import Any, Callable, Optional, Tuple

from ccstruct.linked_list import LinkedList, ListNode

CompareFn = Callable[[Any, Any], int]


def _require_list(*lists: Optional[LinkedList]) -> None:
    if any(lst is None for lst in lists):
        raise TypeError("a list is required")


def _clear(lst: LinkedList) -> None:
    """Forget every node of ``lst`` without touching the nodes."""
    lst.root.prev = lst.root
    lst.root.next = lst.root
    lst.size = 0


def _detach(lst: LinkedList, node: ListNode) -> None:
    node.prev.next = node.next
    node.next.prev = node.prev
    node.prev = None
    node.next = None
    lst.size -= 1


def concat(left: LinkedList, right: LinkedList) -> None:
    """Move every node of ``right`` to the end of ``left``; ``right`` ends empty."""
    _require_list(left, right)
    if right.size == 0:
        return
    first, last = right.root.next, right.root.prev
    tail = left.root.prev
    tail.next = first
    first.prev = tail
    last.next = left.root
    left.root.prev = last
    left.size += right.size
    _clear(right)


def _merged(left: LinkedList, right: LinkedList, cmp: CompareFn) -> LinkedList:
    """Drain both lists into a new list in merged order, left first on ties."""
    result = LinkedList()
    while not left.is_empty() and not right.is_empty():
        source = left if cmp(left.root.next.data, right.root.next.data) <= 0 else right
        node = source.root.next
        _detach(source, node)
        result.insert_node_tail(node)
    concat(result, left)
    concat(result, right)
    return result


def merge(left: LinkedList, right: LinkedList, cmp: CompareFn) -> None:
    """Merge two ordered lists into ``left``; ``right`` ends empty.

    On equal elements the one from ``left`` comes first.
    """
    _require_list(left, right)
    if cmp is None:
        raise TypeError("a comparison function is required")
    if right.size == 0:
        return
    if left.size == 0:
        concat(left, right)
        return
    concat(left, _merged(left, right, cmp))


def merge_into(
    target: LinkedList, left: LinkedList, right: LinkedList, cmp: CompareFn
) -> None:
    """Merge ``left`` and ``right`` and append the result to ``target``.

    Both source lists end empty.
    """
    _require_list(target, left, right)
    if cmp is None:
        raise TypeError("a comparison function is required")
    concat(target, _merged(left, right, cmp))


def split(source: LinkedList, predicate: Callable[[Any], Any]) -> LinkedList:
    """Move the nodes whose data satisfies ``predicate`` into a new list."""
    _require_list(source)
    if predicate is None:
        raise TypeError("a predicate is required")
    taken = LinkedList(source.remove_fn)
    for node in source.nodes():
        if predicate(node.data):
            _detach(source, node)
            taken.insert_node_tail(node)
    return taken


def split_middle(source: LinkedList) -> LinkedList:
    """Cut ``source`` in two; it keeps the first ``len // 2`` nodes.

    The rest is returned as a new list.
    """
    _require_list(source)
    if source.size < 2:
        raise ValueError("a list needs at least two elements to be split")
    keep = source.size // 2
    middle = source.root.next
    for _ in range(keep):
        middle = middle.next

    right = LinkedList(source.remove_fn)
    last = source.root.prev
    before = middle.prev

    right.root.next = middle
    middle.prev = right.root
    right.root.prev = last
    last.next = right.root
    right.size = source.size - keep

    before.next = source.root
    source.root.prev = before
    source.size = keep
    return right


def split_block(
    source: LinkedList, block_size: int, start: Optional[ListNode] = None
) -> Tuple[LinkedList, Optional[ListNode]]:
    """Move up to ``block_size`` nodes, beginning at ``start``, into a new list.

    ``start`` defaults to the head of ``source``. Returns the new list and the
    node that followed the last one moved, or ``None`` at the end of ``source``.
    """
    _require_list(source)
    block = LinkedList(source.remove_fn)
    current = source.root.next if start is None else start
    moved = 0
    while moved < block_size and current is not source.root:
        following = current.next
        _detach(source, current)
        block.insert_node_tail(current)
        current = following
        moved += 1
    return block, (None if current is source.root else current)


def copy_list(source: LinkedList, copy_fn: Callable[[Any], Any]) -> LinkedList:
    """Return a new list holding ``copy_fn(data)`` for every element, in order.

    If ``copy_fn`` returns ``None`` or raises, the partial copy is destroyed.
    """
    _require_list(source)
    if copy_fn is None:
        raise TypeError("a copy function is required")
    copied = LinkedList(source.remove_fn)
    try:
        for data in source:
            duplicate = copy_fn(data)
            if duplicate is None:
                raise ValueError("copy function produced no data")
            copied.insert_tail(duplicate)
    except BaseException:
        copied.destroy()
        raise
    return copied


def swap(first: LinkedList, second: LinkedList) -> None:
    """Exchange the contents of two lists; each keeps its own ``remove_fn``."""
    _require_list(first, second)
    first_nodes = list(first.nodes())
    second_nodes = list(second.nodes())
    _clear(first)
    _clear(second)
    for node in second_nodes:
        first.insert_node_tail(node)
    for node in first_nodes:
        second.insert_node_tail(node)