"""Command-line argument definitions that count and validate their values, with a regex engine, hash table and merge sort."""

__version__ = "0.1.0"