"""A tiny in-memory table store with plain-text .tbl persistence."""

__version__ = "0.1.0"
__all__ = ["database", "table", "main"]