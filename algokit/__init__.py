"""Classic data structures (array, vector, stack, queue, linked list, graph) and small algorithm exercises built on them."""

__version__ = "0.1.0"

__all__ = [
    "array",
    "vector",
    "stack",
    "fifo",
    "linked_list",
    "graph",
    "mst",
    "maze",
    "stackmachine",
    "digits",
    "practice",
]