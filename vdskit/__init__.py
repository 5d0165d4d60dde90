"""Classic data structures: a bounded array list, stacks and linked lists."""

__version__ = "0.1.0"
__all__ = ["arraylist", "stack", "singly_linked", "doubly_linked"]