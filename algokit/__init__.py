"""Readable implementations of classic algorithms and data structures.

Sorting, searching, heaps, graph traversal, binary search trees, recursive
integer functions, and array- and list-based stacks and queues.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]