"""Fixed names from the EPUB/OCF specifications."""

# Root-file pointer of the Open Container Format
CONTAINER_PATH = "META-INF/container.xml"
PACKAGE_MEDIA_TYPE = "application/oebps-package+xml"
