"""Fuel station pump engine."""

__version__ = "1.0.0"
