import io

import pytest

from epub_nav.core.archive import Archive
from epub_nav.core.markup import parse_markup
from epub_nav.core.package import Package
from tests.epub_fixtures import epub2_files, epub3_files, make_epub


@pytest.fixture
def empty_archive():
    archive = Archive(io.BytesIO(make_epub({})))
    yield archive
    archive.close()


@pytest.fixture
def package_from_xml(empty_archive):
    """Build a Package from an OPF string against an empty archive."""

    def _build(xml: str, base_dir: str = "OEBPS") -> Package:
        return Package(empty_archive, parse_markup(xml.encode("utf-8")), base_dir)

    return _build


@pytest.fixture
def epub3_path(tmp_path):
    path = tmp_path / "epub3.epub"
    path.write_bytes(make_epub(epub3_files()))
    return path


@pytest.fixture
def epub2_path(tmp_path):
    path = tmp_path / "epub2.epub"
    path.write_bytes(make_epub(epub2_files()))
    return path
