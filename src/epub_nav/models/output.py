"""Serializable summaries of a publication."""

from pydantic import BaseModel, Field


class NavigationEntry(BaseModel):
    """One reading-order entry."""

    index: int
    title: str
    href: str


class PublicationSummary(BaseModel):
    """Package metadata and navigation of one EPUB file."""

    source_path: str
    package_path: str
    title: str
    language: str
    identifier: str
    isbn: str | None = None
    source: str | None = None
    navigation: list[NavigationEntry] = Field(default_factory=list)
