"""Hand-written sorting algorithms, max-heap helpers, a linked list and a timing bench."""

__version__ = "0.1.0"
__all__ = ["cli", "heap", "linkedlist", "sorting"]