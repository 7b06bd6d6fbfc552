"""OPF package document: metadata and navigation."""

import logging

from bs4 import BeautifulSoup

from epub_nav.core.archive import Archive
from epub_nav.core.content import Content
from epub_nav.core.identifiers import first_isbn, normalize_date, parse_isbn
from epub_nav.core.markup import text_of
from epub_nav.core.navigation import NavigationResolver
from epub_nav.errors import ArchiveErrorReason, InvalidArchiveError
from epub_nav.models.isbn import ISBN

log = logging.getLogger(__name__)


class Package:
    """Metadata and reading order of one OPF package document.

    Args:
        archive: Archive holding the package and its resources
        document: Parsed package document (see ``parse_markup``)
        base_dir: Directory of the package document inside the archive;
            hrefs in the manifest are relative to it

    Raises:
        InvalidArchiveError: If title, language or identifier is missing
    """

    def __init__(self, archive: Archive, document: BeautifulSoup, base_dir: str = ""):
        root = document.find("package")
        if root is None:
            raise InvalidArchiveError(ArchiveErrorReason.MISSING_PACKAGE)

        self.archive = archive
        self.document = document
        self._base_dir = base_dir
        self._navigation: list[Content] | None = None

        self.title = text_of(document.select_one("package > metadata > title"))
        if not self.title:
            raise InvalidArchiveError(ArchiveErrorReason.MISSING_TITLE)

        self.language = text_of(document.select_one("package > metadata > language"))
        if not self.language:
            raise InvalidArchiveError(ArchiveErrorReason.MISSING_LANGUAGE)

        # https://idpf.org/epub/30/spec/epub30-publications.html#sec-opf-metadata-identifiers-pid
        ids = document.select("package > metadata > identifier")
        uid = root.get("unique-identifier")
        if uid is None:
            pid = ids[0] if ids else None
        else:
            pid = next((x for x in ids if x.get("id") == uid), None)
        if pid is None:
            raise InvalidArchiveError(ArchiveErrorReason.MISSING_IDENTIFIER, uid)

        self._unique_identifier = text_of(pid)
        self._modified = normalize_date(self._modification_date())
        if self._modified is not None:
            self.identifier = f"{self._unique_identifier}@{self._modified}"
        else:
            self.identifier = self._unique_identifier

        self.isbn: ISBN | None = first_isbn(x.get_text() for x in ids)

        source = document.select_one("package > metadata > source")
        self.source: ISBN | None = parse_isbn(source.get_text()) if source else None

    @property
    def base_dir(self) -> str:
        """Directory of the package document inside the archive."""
        return self._base_dir

    @property
    def unique_identifier(self) -> str:
        """The unique identifier text, without a modification date."""
        return self._unique_identifier

    @property
    def modified(self) -> str | None:
        """Normalized modification date, if the package declares one."""
        return self._modified

    def _modification_date(self) -> str | None:
        meta = self.document.select_one(
            'package > metadata > meta[property="dcterms:modified"]'
        )
        if meta is None:
            meta = self.document.select_one(
                "package > metadata > date[event=modification]"
            )
        return meta.get_text() if meta is not None else None

    @property
    def navigation(self) -> list[Content]:
        """Content documents in reading order, resolved on first access."""
        if self._navigation is None:
            self._navigation = NavigationResolver(
                self.archive, self.document, self.base_dir
            ).resolve()
        return self._navigation

    def __repr__(self) -> str:
        return f"Package(title={self.title!r}, identifier={self.identifier!r})"
