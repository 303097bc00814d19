import pytest

from ccstruct.linked_list import LinkedList
from ccstruct.list_ops import (
    concat,
    copy_list,
    merge,
    merge_into,
    split,
    split_block,
    split_middle,
    swap,
)

ARRAY_LEN = 10


def cmp_int(a, b):
    return a[0] - b[0]


def box(value):
    return [value]


def values(lst):
    return [item[0] for item in lst]


def make(*nums, remove_fn=None):
    lst = LinkedList(remove_fn)
    items = [box(n) for n in nums]
    for item in items:
        lst.insert_tail(item)
    return lst, items


def assert_ring(lst):
    forward = list(lst.nodes())
    assert len(forward) == len(lst)
    assert list(reversed(list(lst.nodes(reverse=True)))) == forward


def assert_empty(lst):
    assert len(lst) == 0
    assert lst.root.next is lst.root
    assert lst.root.prev is lst.root


# concat

def test_concat_empty_left():
    left, _ = make()
    right, (b1, b2) = make(5, 6)
    concat(left, right)
    assert len(left) == 2
    assert left.root.next.data is b1
    assert left.root.next.next.data is b2
    assert_empty(right)
    assert_ring(left)


def test_concat_normal_list():
    left, (a1, a2) = make(1, 2)
    right, (b1, b2) = make(3, 4)
    concat(left, right)
    assert len(left) == 4
    assert [id(x) for x in left] == [id(a1), id(a2), id(b1), id(b2)]
    assert_empty(right)
    assert_ring(left)


def test_concat_empty_right_leaves_left():
    left, _ = make(1, 2)
    right, _ = make()
    concat(left, right)
    assert values(left) == [1, 2]


def test_concat_error_handling():
    valid, _ = make()
    with pytest.raises(TypeError):
        concat(valid, None)
    with pytest.raises(TypeError):
        concat(None, valid)


# merge

def test_merge_normal_list():
    left, (a1, a2) = make(2, 3)
    right, (b1, b2) = make(1, 4)
    merge(left, right, cmp_int)
    assert len(left) == 4
    assert left.root.next.data is b1
    assert left.root.next.next.data is a1
    assert values(left) == [1, 2, 3, 4]
    assert_empty(right)
    assert_ring(left)


def test_merge_right_empty_then_one():
    left, (a1, a2) = make(2, 3)
    right, _ = make()
    merge(left, right, cmp_int)
    assert len(left) == 2
    assert [id(x) for x in left] == [id(a1), id(a2)]
    assert left.root.next.next.next is left.root
    assert_empty(right)

    b1 = box(1)
    right.insert_tail(b1)
    merge(left, right, cmp_int)
    assert len(left) == 3
    assert [id(x) for x in left] == [id(b1), id(a1), id(a2)]
    assert left.root.next.next.next.next is left.root
    assert values(left) == sorted(values(left))
    assert_empty(right)


def test_merge_left_empty_then_one():
    left, _ = make()
    right, (b1, b2) = make(1, 4)
    merge(left, right, cmp_int)
    assert [id(x) for x in left] == [id(b1), id(b2)]
    assert left.root.next.next.next is left.root
    assert_empty(right)

    left, (a1,) = make(2)
    c1, c2 = box(1), box(4)
    right.insert_tail(c1)
    right.insert_tail(c2)
    merge(left, right, cmp_int)
    assert len(left) == 3
    assert [id(x) for x in left] == [id(c1), id(a1), id(c2)]
    assert values(left) == [1, 2, 4]
    assert_empty(right)
    assert_ring(left)


def test_merge_prefers_left_on_ties():
    left, (a1,) = make(5)
    right, (b1,) = make(5)
    merge(left, right, cmp_int)
    assert [id(x) for x in left] == [id(a1), id(b1)]


def test_merge_needs_cmp():
    left, _ = make(1)
    right, _ = make(2)
    with pytest.raises(TypeError):
        merge(left, right, None)


def test_merge_into_target():
    target, _ = make()
    left, _ = make(1, 5, 9)
    right, _ = make(2, 3, 10)
    merge_into(target, left, right, cmp_int)
    assert values(target) == [1, 2, 3, 5, 9, 10]
    assert len(target) == 6
    assert_empty(left)
    assert_empty(right)
    assert_ring(target)


def test_merge_into_appends_after_existing():
    target, _ = make(0)
    left, _ = make(3)
    right, _ = make(1)
    merge_into(target, left, right, cmp_int)
    assert values(target) == [0, 1, 3]
    assert len(target) == 3


def test_merge_into_errors():
    lst, _ = make()
    with pytest.raises(TypeError):
        merge_into(lst, None, lst, cmp_int)
    with pytest.raises(TypeError):
        merge_into(LinkedList(), LinkedList(), LinkedList(), None)


# split

def need_split(data):
    return data[0] > 1


def test_split_empty_list():
    old, _ = make()
    new = split(old, need_split)
    assert len(old) == 0
    assert len(new) == 0


def test_split_normal_list():
    old, _ = make(*range(ARRAY_LEN))
    new = split(old, need_split)
    assert len(old) == 2
    assert len(new) == ARRAY_LEN - 2
    assert values(old) == [0, 1]
    assert values(new) == list(range(2, ARRAY_LEN))
    assert_ring(old)
    assert_ring(new)


def test_split_keeps_remove_fn():
    removed = []
    old, _ = make(1, 2, 3, remove_fn=removed.append)
    new = split(old, need_split)
    new.destroy()
    assert values(removed) == [2, 3]


def test_split_error_handling():
    lst = LinkedList()
    with pytest.raises(TypeError):
        split(None, need_split)
    with pytest.raises(TypeError):
        split(lst, None)


def test_split_middle_error_handling():
    with pytest.raises(TypeError):
        split_middle(None)
    with pytest.raises(ValueError):
        split_middle(LinkedList())
    single, _ = make(1)
    with pytest.raises(ValueError):
        split_middle(single)


def test_split_middle_normal_list():
    old, _ = make(*range(ARRAY_LEN))
    new = split_middle(old)
    assert len(old) == ARRAY_LEN // 2
    assert len(new) == ARRAY_LEN - ARRAY_LEN // 2
    assert values(old) == [0, 1, 2, 3, 4]
    assert values(new) == [5, 6, 7, 8, 9]
    assert_ring(old)
    assert_ring(new)

    concat(old, new)
    assert_empty(new)
    old.insert_tail(box(ARRAY_LEN))
    new = split_middle(old)
    now_len = ARRAY_LEN + 1
    assert len(old) == now_len // 2
    assert len(new) == now_len - now_len // 2
    assert values(new) == [5, 6, 7, 8, 9, 10]


# split_block

def test_split_block_walks_list():
    source, _ = make(*range(7))
    block, cursor = split_block(source, 3, None)
    assert values(block) == [0, 1, 2]
    assert cursor.data == [3]
    block2, cursor = split_block(source, 3, cursor)
    assert values(block2) == [3, 4, 5]
    block3, cursor = split_block(source, 3, cursor)
    assert values(block3) == [6]
    assert cursor is None
    assert_empty(source)
    assert_ring(block2)


def test_split_block_from_middle():
    source, _ = make(1, 2, 3, 4)
    start = source.root.next.next
    block, cursor = split_block(source, 2, start)
    assert values(block) == [2, 3]
    assert values(source) == [1, 4]
    assert cursor.data == [4]
    assert len(source) == 2


# copy

def copy_int(data):
    return list(data)


def test_copy_empty_list():
    lst = LinkedList()
    copied = copy_list(lst, copy_int)
    assert_empty(copied)


def test_copy_single_node():
    lst, (item,) = make(1)
    copied = copy_list(lst, copy_int)
    assert copied.head() == item
    assert copied.head() is not item
    assert len(copied) == 1


def test_copy_multiple_nodes():
    lst = LinkedList()
    for i in range(5):
        lst.insert_head(box(i))
    copied = copy_list(lst, copy_int)
    assert len(copied) == len(lst)
    for old, new in zip(lst, copied):
        assert old == new
        assert old is not new
    assert values(copied) == [4, 3, 2, 1, 0]
    assert_ring(copied)


def test_copy_error_handling():
    with pytest.raises(TypeError):
        copy_list(None, None)
    with pytest.raises(TypeError):
        copy_list(LinkedList(), None)


def test_copy_failure_destroys_partial_copy():
    removed = []
    lst, _ = make(1, 2, 3, remove_fn=removed.append)

    def flaky(data):
        return None if data[0] == 3 else list(data)

    with pytest.raises(ValueError):
        copy_list(lst, flaky)
    assert values(removed) == [1, 2]
    assert values(lst) == [1, 2, 3]


# swap

def test_swap_both_filled():
    first, _ = make(1, 2)
    second, _ = make(7, 8, 9)
    swap(first, second)
    assert values(first) == [7, 8, 9]
    assert values(second) == [1, 2]
    assert len(first) == 3
    assert_ring(first)
    assert_ring(second)


def test_swap_with_empty():
    first, _ = make()
    second, _ = make(4, 5)
    swap(first, second)
    assert values(first) == [4, 5]
    assert_empty(second)
    swap(first, second)
    assert values(second) == [4, 5]
    assert_empty(first)


def test_swap_errors():
    with pytest.raises(TypeError):
        swap(None, LinkedList())