"""Opening EPUB archives."""

import logging
import os
import posixpath
from typing import BinaryIO

from epub_nav.core.archive import Archive
from epub_nav.core.markup import parse_markup
from epub_nav.core.package import Package
from epub_nav.errors import ArchiveErrorReason, InvalidArchiveError
from epub_nav.specification import CONTAINER_PATH, PACKAGE_MEDIA_TYPE

log = logging.getLogger(__name__)


class Publication:
    """An open EPUB publication.

    Use ``Publication.open`` and close it when done, preferably with a
    ``with`` block. The package document is parsed on first access to
    ``package``.
    """

    def __init__(self, archive: Archive, package_path: str):
        self.archive = archive
        self.package_path = package_path
        self._package: Package | None = None

    @classmethod
    def open(cls, source: str | os.PathLike | BinaryIO) -> "Publication":
        """Open a publication from a file path or a binary file object.

        Raises:
            InvalidArchiveError: If the input is not a ZIP archive or the
                container does not point at an existing package document
        """
        archive = Archive(source)
        try:
            package_path = find_package_path(archive)
        except BaseException:
            archive.close()
            raise
        log.debug("Package document: %s", package_path)
        return cls(archive, package_path)

    @property
    def package(self) -> Package:
        """The parsed package document."""
        if self._package is None:
            data = self.archive.read(self.package_path)
            if data is None:
                raise InvalidArchiveError(
                    ArchiveErrorReason.MISSING_PACKAGE, self.package_path
                )
            self._package = Package(
                self.archive,
                parse_markup(data),
                posixpath.dirname(self.package_path),
            )
        return self._package

    def close(self) -> None:
        """Release the archive. Safe to call more than once."""
        self.archive.close()

    def __enter__(self) -> "Publication":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def find_package_path(archive: Archive) -> str:
    """Read META-INF/container.xml and return the package document's path."""
    data = archive.read(CONTAINER_PATH)
    if data is None:
        raise InvalidArchiveError(ArchiveErrorReason.MISSING_CONTAINER)

    container = parse_markup(data)
    rootfile = next(
        (
            x
            for x in container.select("rootfile[full-path]")
            if x.get("media-type") == PACKAGE_MEDIA_TYPE and x["full-path"]
        ),
        None,
    )
    if rootfile is None:
        raise InvalidArchiveError(ArchiveErrorReason.MISSING_PACKAGE)

    path = rootfile["full-path"]
    if not archive.has(path):
        raise InvalidArchiveError(ArchiveErrorReason.MISSING_PACKAGE, path)
    return path
