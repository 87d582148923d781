"""Classic data structures: bitmap, circular buffer, search trees, directed graph, queues and heaps, vector, suffix array and a profiler."""

__version__ = "0.1.0"

__all__ = [
    "avl_tree",
    "bitmap",
    "bst",
    "circular_buffer",
    "graph",
    "profiler",
    "queues",
    "suffix_array",
    "vector",
]