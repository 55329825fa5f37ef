"""Character, number, memory, string, linked-list, output and line-reading helpers."""

__version__ = "0.1.0"

__all__ = ["chars", "numbers", "memory", "strings", "linkedlist", "output", "lines"]