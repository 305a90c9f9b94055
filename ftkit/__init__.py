"""C-style character, memory, string, linked-list, output, formatting and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "convert", "text", "linkedlist", "output", "printf", "nextline"]