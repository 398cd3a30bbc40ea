"""Solutions to competitive programming problems as plain Python functions and data structures."""

__version__ = "0.1.0"