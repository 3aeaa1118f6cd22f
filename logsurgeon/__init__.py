"""Wildcard search expressions, expression views and query interpretations for log searching."""

__version__ = "0.0.1"