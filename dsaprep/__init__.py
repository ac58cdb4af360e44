"""Classic data structures and algorithms: linked lists, stacks and binary trees."""

__version__ = "0.1.0"