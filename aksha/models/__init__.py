"""SQLAlchemy models."""

from __future__ import annotations

from aksha.models.secure_item import SecureItem

__all__ = [
    "SecureItem",
]
