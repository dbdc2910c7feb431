"""Classic interview algorithms on lists, trees, arrays, strings and numbers."""

__version__ = "0.1.0"
__all__ = ["arrays", "linked", "numbers", "strings", "trees"]