"""Data models."""

from epub_nav.models.isbn import ISBN
from epub_nav.models.output import NavigationEntry, PublicationSummary

__all__ = [
    "ISBN",
    "NavigationEntry",
    "PublicationSummary",
]
