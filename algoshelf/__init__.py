"""Classic algorithms: sorting, searching, strings, bit tricks and graphs."""

__version__ = "0.1.0"