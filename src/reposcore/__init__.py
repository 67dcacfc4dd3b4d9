"""Contribution score reports for source repositories."""

__version__ = "0.1.0"
