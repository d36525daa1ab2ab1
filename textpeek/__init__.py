"""TextPeek desktop viewer for text-like files with a persisted recent list."""

__version__ = "0.1.0"
