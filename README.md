# ccstruct

Small container types with fixed capacities and explicit element clean-up
hooks. The package is a library only: it has no command-line tool.

- `ccstruct.array.Array`: a fixed number of slots (each `None` until set) with
  `compare`, `swap`, `reverse`, `copy_index`, `resize` and `dispose`.
- `ccstruct.array_sort`: `quick_sort`, `bubble_sort` and `merge_sort`, which sort
  an `Array` in place using a three-way comparison function `cmp(a, b)` that
  returns a negative number, zero or a positive number.
- `ccstruct.array_stack.ArrayStack`: a bounded LIFO stack with `push`, `pop`,
  `peek`, `len()` and `space()`.
- `ccstruct.array_queue.ArrayQueue`: a bounded FIFO queue that uses every slot,
  with `enqueue`, `dequeue`, `peek`, `is_empty`, `is_full` and `len()`.
- `ccstruct.ring_queue.ArrayRingQueue`: a ring buffer that keeps one slot free,
  so `slots` slots hold `slots - 1` items; it also offers `capacity()` and
  `space()`.
- `ccstruct.linked_list.LinkedList`: a circular doubly linked list with a
  sentinel `root` node, made of `ListNode` objects.
- `ccstruct.list_ops`: `concat`, `merge`, `merge_into`, `split`,
  `split_middle`, `split_block`, `copy_list` and `swap` for linked lists.
  These move nodes between lists rather than copying them (except
  `copy_list`).

## Installation

```
pip install .
```

## Examples

```python
from ccstruct.array import Array
from ccstruct.array_sort import merge_sort

arr = Array(5, None)
for i, v in enumerate([3, 1, 4, 1, 5]):
    arr[i] = v
merge_sort(arr, lambda a, b: a - b)
print(list(arr))          # [1, 1, 3, 4, 5]
```

```python
from ccstruct.array_stack import ArrayStack, StackFullError

stack = ArrayStack(2, None)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except StackFullError:
    pass
print(stack.pop(), len(stack), stack.space())   # 2 1 1
```

```python
from ccstruct.ring_queue import ArrayRingQueue

ring = ArrayRingQueue(8, None)
print(ring.capacity())    # 7
ring.enqueue("a")
print(ring.dequeue())     # a
```

```python
from ccstruct.linked_list import LinkedList
from ccstruct.list_ops import merge, split_middle

left = LinkedList(None)
right = LinkedList(None)
for v in (2, 3):
    left.insert_tail(v)
for v in (1, 4):
    right.insert_tail(v)
merge(left, right, lambda a, b: a - b)
print(list(left))         # [1, 2, 3, 4]
second_half = split_middle(left)
print(list(left), list(second_half))   # [1, 2] [3, 4]
```

## Errors

- Empty or full containers raise dedicated exceptions: `StackEmptyError` and
  `StackFullError` (in `array_stack`), `QueueEmptyError` and `QueueFullError`
  (in `array_queue`, also raised by `ArrayRingQueue`), and `ListEmptyError`
  (in `linked_list`). All of them are subclasses of `IndexError`.
- Out-of-range array indices raise `IndexError`.
- Invalid values, such as a negative size, `reverse` with equal indices or
  `split_middle` on a list of fewer than two elements, raise `ValueError`.
- A missing comparison, predicate or copy function, or a missing list or
  node, raises `TypeError`.

## Clean-up hooks

Each container takes a `remove_fn` callback. `Array.dispose()`,
`ArrayStack.dispose()`, `ArrayQueue.dispose()` and `ArrayRingQueue.dispose()`
call it on every slot of the backing array, including slots that are empty
(`None`) or whose items were already taken out. `LinkedList.destroy()` calls
it on every element still in the list and leaves the list empty.

## Running the tests

```
pip install .[test]
pytest
```