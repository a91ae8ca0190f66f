"""Classic data-structure and algorithm exercises: arrays, number systems, recursion, sorting, a bounded stack and linked lists."""

__version__ = "0.1.0"