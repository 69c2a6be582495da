"""Character, number, string, byte-buffer and linked-list helpers, and a B-tree of lines."""

__version__ = "0.1.0"
__all__ = [
    "btree",
    "buffers",
    "chars",
    "cli",
    "lists",
    "mapping",
    "memory",
    "numbers",
    "output",
    "search",
    "words",
]