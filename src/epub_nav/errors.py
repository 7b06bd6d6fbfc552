"""Errors raised while reading an EPUB archive."""

from enum import Enum


class ArchiveErrorReason(str, Enum):
    """Why an archive was rejected."""

    NOT_A_ZIP = "not_a_zip"
    MISSING_CONTAINER = "missing_container"
    MISSING_PACKAGE = "missing_package"
    MISSING_TITLE = "missing_title"
    MISSING_LANGUAGE = "missing_language"
    MISSING_IDENTIFIER = "missing_identifier"
    MISSING_SPINE = "missing_spine"
    MISSING_NAVIGATION = "missing_navigation"
    MISSING_NAVIGATION_TOC = "missing_navigation_toc"
    MISSING_CONTENT = "missing_content"


_MESSAGES = {
    ArchiveErrorReason.NOT_A_ZIP: "File is not a ZIP archive.",
    ArchiveErrorReason.MISSING_CONTAINER: (
        "Archive has no META-INF/container.xml entry."
    ),
    ArchiveErrorReason.MISSING_PACKAGE: (
        "Container does not reference an existing package document."
    ),
    ArchiveErrorReason.MISSING_TITLE: "Package metadata has no dc:title.",
    ArchiveErrorReason.MISSING_LANGUAGE: "Package metadata has no dc:language.",
    ArchiveErrorReason.MISSING_IDENTIFIER: "Package metadata has no dc:identifier.",
    ArchiveErrorReason.MISSING_SPINE: "Package has no spine.",
    ArchiveErrorReason.MISSING_NAVIGATION: (
        "Package has neither a navigation document nor an NCX table of contents."
    ),
    ArchiveErrorReason.MISSING_NAVIGATION_TOC: (
        "Navigation document has no nav element of type 'toc'."
    ),
    ArchiveErrorReason.MISSING_CONTENT: "Content document is missing from the archive.",
}


class InvalidArchiveError(Exception):
    """The EPUB archive cannot be read as a publication."""

    def __init__(self, reason: ArchiveErrorReason, detail: str | None = None):
        self.reason = reason
        self.detail = detail
        message = _MESSAGES[reason]
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
