"""Classic algorithm solutions over linked lists, strings, graphs and arrays."""

__version__ = "0.1.0"
__all__ = ["linked_list", "strings", "graphs", "arrays"]