"""Basic data structures: a doubly linked list, an array-backed queue and a linked stack."""

__version__ = "0.1.0"
__all__ = ["linked_list", "array_queue", "linked_stack"]