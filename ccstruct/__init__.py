"""Fixed-capacity arrays, stacks and queues, array sorting, and circular linked lists."""

__version__ = "1.0.0"
__all__ = [
    "array",
    "array_sort",
    "array_stack",
    "array_queue",
    "ring_queue",
    "linked_list",
    "list_ops",
]