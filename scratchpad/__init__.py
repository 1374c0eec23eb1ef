"""Byte and string helpers, a book list, a house price record, and plain TCP file-transfer programs."""

__version__ = "0.1.0"