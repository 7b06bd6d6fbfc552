"""Read EPUB package metadata and reading-order navigation."""

from epub_nav.core.content import Content
from epub_nav.core.package import Package
from epub_nav.core.publication import Publication
from epub_nav.errors import ArchiveErrorReason, InvalidArchiveError
from epub_nav.models.isbn import ISBN

__all__ = [
    "Publication",
    "Package",
    "Content",
    "ISBN",
    "InvalidArchiveError",
    "ArchiveErrorReason",
]
