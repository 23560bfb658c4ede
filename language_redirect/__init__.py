"""Redirects the bare homepage to the homepage of the visitor's language."""

__version__ = "1.0.0"
