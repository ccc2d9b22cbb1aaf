"""Solutions to classic algorithm problems on trees, strings, arrays and sorted data."""

__version__ = "0.1.0"
__all__ = ["arrays", "search", "strings", "trees"]