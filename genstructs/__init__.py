"""Classic data structures: queues, a linked list, a vector with sorting helpers and a binary search tree."""

__version__ = "0.1.0"
__all__ = ["queues", "linked_list", "vector", "binary_tree"]