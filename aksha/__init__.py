"""Aksha safety companion service."""

__version__ = "0.1.0"
