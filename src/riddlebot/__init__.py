"""Automated solver for chained cipher riddles."""

__version__ = "0.1.0"
