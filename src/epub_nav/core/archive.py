"""Named entry access into the EPUB ZIP container."""

import logging
import os
import zipfile
from typing import BinaryIO

from epub_nav.errors import ArchiveErrorReason, InvalidArchiveError

log = logging.getLogger(__name__)


class Archive:
    """Read-only view of a ZIP archive's entries by path."""

    def __init__(self, source: str | os.PathLike | BinaryIO):
        try:
            self._zip = zipfile.ZipFile(source, "r")
        except zipfile.BadZipFile as e:
            raise InvalidArchiveError(ArchiveErrorReason.NOT_A_ZIP, str(e)) from e
        self.closed = False

    def has(self, path: str) -> bool:
        """Check whether an entry exists (case-sensitive, '/' separated)."""
        try:
            self._zip.getinfo(path)
        except KeyError:
            return False
        return True

    def read(self, path: str) -> bytes | None:
        """Return the entry's bytes, or None if there is no such entry."""
        if not self.has(path):
            log.debug("Archive entry not found: %s", path)
            return None
        return self._zip.read(path)

    def close(self) -> None:
        if not self.closed:
            self._zip.close()
            self.closed = True
