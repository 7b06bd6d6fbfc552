"""Reading-order navigation from an EPUB3 nav document or an EPUB2 NCX."""

import logging
import posixpath
from urllib.parse import unquote, urljoin, urlsplit

from bs4 import BeautifulSoup, Tag

from epub_nav.core.archive import Archive
from epub_nav.core.content import Content
from epub_nav.core.markup import parse_markup, text_of
from epub_nav.errors import ArchiveErrorReason, InvalidArchiveError

log = logging.getLogger(__name__)

# Only used to give relative references an absolute base for urljoin
_RESOLVE_ROOT = "https://archive.invalid/"


def resolve_href(base_dir: str, href: str) -> str:
    """Resolve an href from the package document to an archive entry path.

    Dot segments collapse, query and fragment are dropped and the result
    has no leading slash.
    """
    relative = posixpath.join(base_dir, href) if base_dir else href
    path = urlsplit(urljoin(_RESOLVE_ROOT, relative)).path
    return unquote(path).lstrip("/")


class NavigationResolver:
    """Build the ordered list of content documents for one package.

    The EPUB3 navigation document is used when the manifest declares one
    that exists in the archive. Otherwise the spine is walked and each item
    is titled from the NCX table of contents the spine points at.
    """

    def __init__(self, archive: Archive, document: BeautifulSoup, base_dir: str):
        self.archive = archive
        self.document = document
        self.base_dir = base_dir

    def resolve(self) -> list[Content]:
        spine = self.document.select_one("package > spine")
        if spine is None:
            raise InvalidArchiveError(ArchiveErrorReason.MISSING_SPINE)

        manifest = self._manifest_items()

        nav_path = self._nav_document_path()
        if nav_path is not None:
            log.debug("Reading navigation document %s", nav_path)
            return self._from_nav_document(nav_path)

        ncx_path = self._ncx_path(spine, manifest)
        if ncx_path is not None:
            log.debug("No navigation document, reading spine with NCX %s", ncx_path)
            return self._from_spine(spine, manifest, ncx_path)

        raise InvalidArchiveError(ArchiveErrorReason.MISSING_NAVIGATION)

    def _manifest_items(self) -> dict[str, str]:
        """Map manifest ids to hrefs, keeping the first item for each id."""
        items: dict[str, str] = {}
        for item in self.document.select("package > manifest > item[id]"):
            items.setdefault(item["id"], item.get("href", ""))
        return items

    def _existing(self, href: str | None) -> str | None:
        if not href:
            return None
        path = resolve_href(self.base_dir, href)
        return path if self.archive.has(path) else None

    def _nav_document_path(self) -> str | None:
        item = self.document.select_one("package > manifest > item[properties~=nav]")
        if item is None:
            return None
        return self._existing(item.get("href"))

    def _ncx_path(self, spine: Tag, manifest: dict[str, str]) -> str | None:
        toc_id = spine.get("toc")
        if not toc_id or toc_id not in manifest:
            return None
        return self._existing(manifest[toc_id])

    def _from_nav_document(self, path: str) -> list[Content]:
        navdoc = parse_markup(self.archive.read(path))
        toc = navdoc.select_one("nav[type=toc]")
        if toc is None:
            raise InvalidArchiveError(ArchiveErrorReason.MISSING_NAVIGATION_TOC, path)

        return [
            Content(
                self.archive,
                text_of(link),
                resolve_href(self.base_dir, link["href"]),
            )
            for link in toc.select("li > a[href]")
        ]

    def _from_spine(
        self, spine: Tag, manifest: dict[str, str], ncx_path: str
    ) -> list[Content]:
        ncx = parse_markup(self.archive.read(ncx_path))
        targets = ncx.select("navPoint content[src]")

        hrefs = [
            manifest[itemref["idref"]]
            for itemref in spine.find_all(True, recursive=False)
            if itemref.get("idref") in manifest
        ]

        contents = []
        for href in hrefs:
            # Prefix match: src may carry a fragment the spine href does not
            target = next((t for t in targets if t["src"].startswith(href)), None)
            label = target.parent.select_one("text") if target is not None else None
            if label is None:
                log.debug("No NCX label for spine item %s, skipping", href)
                continue
            contents.append(
                Content(self.archive, text_of(label), resolve_href(self.base_dir, href))
            )

        return contents
