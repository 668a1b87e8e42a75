"""catname - category display names that stay unambiguous."""

__version__ = "0.1.0"
