"""In-memory EPUB builders shared by the tests."""

import io
import zipfile

CONTAINER_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<container xmlns="urn:oasis:names:tc:opendocument:xmlns:container" version="1.0">
  <rootfiles>
    <rootfile full-path="{opf_path}" media-type="application/oebps-package+xml"/>
  </rootfiles>
</container>"""

METADATA = """\
    <dc:title>Test Book</dc:title>
    <dc:language>en-US</dc:language>
    <dc:identifier id="uid">urn:uuid:A1B0D67E-2E81-4DF5-9E67-A64CBE366809</dc:identifier>"""


def build_opf(
    metadata: str = METADATA,
    manifest: list[tuple[str, str, str | None]] | None = None,
    spine: list[str] | None = None,
    spine_toc: str | None = None,
    unique_identifier: str | None = None,
    with_spine: bool = True,
) -> str:
    """Build an OPF package document.

    manifest: [(id, href, properties), ...]
    spine: manifest ids in reading order
    """
    manifest = manifest or []
    spine = spine or []

    items = "\n".join(
        f'    <item id="{mid}" href="{href}" media-type="application/xhtml+xml"'
        + (f' properties="{props}"' if props else "")
        + "/>"
        for mid, href, props in manifest
    )
    itemrefs = "\n".join(f'    <itemref idref="{idref}"/>' for idref in spine)
    toc_attr = f' toc="{spine_toc}"' if spine_toc else ""
    uid_attr = f' unique-identifier="{unique_identifier}"' if unique_identifier else ""
    spine_el = f"  <spine{toc_attr}>\n{itemrefs}\n  </spine>" if with_spine else ""

    return f"""\
<?xml version="1.0" encoding="UTF-8"?>
<package xmlns="http://www.idpf.org/2007/opf" version="3.0"{uid_attr}>
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/" xmlns:opf="http://www.idpf.org/2007/opf">
{metadata}
  </metadata>
  <manifest>
{items}
  </manifest>
{spine_el}
</package>"""


def build_chapter(title: str, body: str = "<p>Text</p>") -> str:
    return f"""\
<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.1//EN" "http://www.w3.org/TR/xhtml11/DTD/xhtml11.dtd">
<html xmlns="http://www.w3.org/1999/xhtml">
<head><title>{title}</title></head>
<body>
{body}
</body>
</html>"""


def build_nav(entries: list[tuple[str, str]], nav_type: str = "toc") -> str:
    """entries: [(label, href), ...]"""
    li_items = "\n".join(
        f'      <li><a href="{href}">{label}</a></li>' for label, href in entries
    )
    return f"""\
<?xml version="1.0" encoding="UTF-8"?>
<html xmlns="http://www.w3.org/1999/xhtml" xmlns:epub="http://www.idpf.org/2007/ops">
<head><title>Contents</title></head>
<body>
  <nav epub:type="{nav_type}">
    <ol>
{li_items}
    </ol>
  </nav>
</body>
</html>"""


def build_ncx(entries: list[tuple[str, str]]) -> str:
    """entries: [(label, src), ...]"""
    points = "\n".join(
        f"""\
    <navPoint id="np{i}" playOrder="{i + 1}">
      <navLabel><text>{label}</text></navLabel>
      <content src="{src}"/>
    </navPoint>"""
        for i, (label, src) in enumerate(entries)
    )
    return f"""\
<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE ncx PUBLIC "-//NISO//DTD ncx 2005-1//EN" "http://www.daisy.org/z3986/2005/ncx-2005-1.dtd">
<ncx xmlns="http://www.daisy.org/z3986/2005/ncx/" version="2005-1">
  <navMap>
{points}
  </navMap>
</ncx>"""


def make_epub(
    files: dict[str, str | bytes],
    opf_path: str | None = "OEBPS/content.opf",
    container: str | None = None,
) -> bytes:
    """Build an EPUB ZIP in memory.

    Pass ``opf_path=None`` to leave out META-INF/container.xml.
    """
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("mimetype", "application/epub+zip")
        if container is not None:
            zf.writestr("META-INF/container.xml", container)
        elif opf_path is not None:
            zf.writestr("META-INF/container.xml", CONTAINER_XML.format(opf_path=opf_path))
        for path, content in files.items():
            zf.writestr(path, content)
    return buf.getvalue()


def epub3_files() -> dict[str, str]:
    """A small EPUB3 book with a nav document and a legacy NCX."""
    return {
        "OEBPS/content.opf": build_opf(
            manifest=[
                ("nav", "nav.xhtml", "nav"),
                ("ncx", "toc.ncx", None),
                ("ch1", "Text/chapter1.xhtml", None),
                ("ch2", "Text/chapter2.xhtml", None),
            ],
            spine=["ch1", "ch2"],
            spine_toc="ncx",
        ),
        "OEBPS/nav.xhtml": build_nav(
            [
                ("Chapter One", "Text/chapter1.xhtml"),
                ("Chapter Two", "Text/chapter2.xhtml#start"),
            ]
        ),
        "OEBPS/toc.ncx": build_ncx(
            [
                ("NCX One", "Text/chapter1.xhtml"),
                ("NCX Two", "Text/chapter2.xhtml"),
            ]
        ),
        "OEBPS/Text/chapter1.xhtml": build_chapter("Chapter One"),
        "OEBPS/Text/chapter2.xhtml": build_chapter("Chapter Two"),
    }


def epub2_files() -> dict[str, str]:
    """A small EPUB2 book with only an NCX table of contents."""
    return {
        "OEBPS/content.opf": build_opf(
            manifest=[
                ("ncx", "toc.ncx", None),
                ("cover", "cover.xhtml", None),
                ("ch1", "chapter1.xhtml", None),
                ("ch2", "chapter2.xhtml", None),
            ],
            spine=["cover", "ch1", "ch2"],
            spine_toc="ncx",
        ),
        "OEBPS/toc.ncx": build_ncx(
            [
                ("Chapter One", "chapter1.xhtml"),
                ("Chapter Two", "chapter2.xhtml#part1"),
            ]
        ),
        "OEBPS/cover.xhtml": build_chapter("Cover"),
        "OEBPS/chapter1.xhtml": build_chapter("Chapter One"),
        "OEBPS/chapter2.xhtml": build_chapter("Chapter Two"),
    }
