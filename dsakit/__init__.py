"""Classic data structures, sorting algorithms and thread-based concurrency patterns."""

__version__ = "0.1.0"