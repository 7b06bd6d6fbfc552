"""Lazy handles to content documents inside the archive."""

from bs4 import BeautifulSoup

from epub_nav.core.archive import Archive
from epub_nav.core.markup import parse_markup
from epub_nav.errors import ArchiveErrorReason, InvalidArchiveError


class Content:
    """A content document of the publication, opened on demand."""

    def __init__(self, archive: Archive, title: str, href: str):
        self._archive = archive
        self._title = title
        self._href = href

    @property
    def title(self) -> str:
        return self._title

    @property
    def href(self) -> str:
        """Archive-relative path of the document."""
        return self._href

    def open(self) -> BeautifulSoup:
        """Read and parse the document.

        Every call parses the entry again; keep the result if it is needed
        more than once.

        Raises:
            InvalidArchiveError: If the entry is not in the archive
        """
        data = self._archive.read(self._href)
        if data is None:
            raise InvalidArchiveError(ArchiveErrorReason.MISSING_CONTENT, self._href)
        return parse_markup(data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Content):
            return NotImplemented
        return (self._title, self._href) == (other._title, other._href)

    def __hash__(self) -> int:
        return hash((self._title, self._href))

    def __repr__(self) -> str:
        return f"Content(title={self._title!r}, href={self._href!r})"

    def __str__(self) -> str:
        return f"{self._title} ({self._href})"
