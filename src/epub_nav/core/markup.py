"""Namespace-agnostic XML parsing for EPUB documents."""

from bs4 import BeautifulSoup, Tag


def parse_markup(data: bytes) -> BeautifulSoup:
    """Parse XML bytes into a tree queryable without namespace prefixes.

    lxml's XML parser is used in recover mode without loading DTDs, so
    documents with remote or broken doctypes still parse. Element and
    attribute names are reduced to their local names afterwards:
    ``<dc:title>`` is selected with ``title`` and ``epub:type="toc"`` with
    ``[type=toc]``.
    """
    soup = BeautifulSoup(data, "lxml-xml")
    for tag in soup.find_all(True):
        _strip_namespaces(tag)
    return soup


def _strip_namespaces(tag: Tag) -> None:
    tag.name = _local_name(tag.name)
    tag.prefix = None
    tag.namespace = None

    attrs = {}
    for key, value in tag.attrs.items():
        key = str(key)
        if key == "xmlns" or key.startswith("xmlns:"):
            continue
        local = _local_name(key)
        # An unprefixed attribute wins over a prefixed one with the same name
        if local in attrs and ":" in key:
            continue
        attrs[local] = value
    tag.attrs = attrs


def _local_name(name: str) -> str:
    return name.rsplit(":", 1)[-1]


def text_of(tag: Tag | None) -> str:
    """Return the element's trimmed text content, or '' if absent."""
    if tag is None:
        return ""
    return tag.get_text().strip()
