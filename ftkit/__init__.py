"""Character, number, byte-buffer, string, output, linked-list and line-reading utilities."""

__version__ = "0.1.0"
__all__ = ["chars", "numbers", "memory", "strings", "output", "lists", "linereader"]