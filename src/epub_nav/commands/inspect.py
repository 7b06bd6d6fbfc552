"""Info and toc command implementations."""

from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from epub_nav.core.publication import Publication
from epub_nav.models.output import NavigationEntry, PublicationSummary


def build_summary(book_path: Path, with_navigation: bool = True) -> PublicationSummary:
    """Open the EPUB and collect its metadata (and navigation)."""
    with Publication.open(book_path) as pub:
        package = pub.package
        navigation = []
        if with_navigation:
            navigation = [
                NavigationEntry(index=i, title=content.title, href=content.href)
                for i, content in enumerate(package.navigation)
            ]
        return PublicationSummary(
            source_path=str(book_path),
            package_path=pub.package_path,
            title=package.title,
            language=package.language,
            identifier=package.identifier,
            isbn=package.isbn.canonical_number if package.isbn else None,
            source=package.source.canonical_number if package.source else None,
            navigation=navigation,
        )


def execute_info(book_path: Path, as_json: bool, console: Console) -> None:
    """Execute the info command."""
    summary = build_summary(book_path, with_navigation=False)

    if as_json:
        console.print_json(summary.model_dump_json(exclude={"navigation"}))
        return

    info_lines = [
        f"[bold]{summary.title}[/]",
        "",
        f"[dim]Language:[/] {summary.language}",
        f"[dim]Identifier:[/] {summary.identifier}",
        f"[dim]ISBN:[/] {summary.isbn or 'None'}",
        f"[dim]Source ISBN:[/] {summary.source or 'None'}",
        f"[dim]Package:[/] {summary.package_path}",
    ]

    console.print()
    console.print(
        Panel(
            "\n".join(info_lines),
            title="Publication",
            border_style="green",
        )
    )
    console.print()


def execute_toc(book_path: Path, as_json: bool, console: Console) -> None:
    """Execute the toc command."""
    summary = build_summary(book_path)

    if as_json:
        console.print_json(summary.model_dump_json())
        return

    table = Table(
        title=f"{summary.title}: Navigation",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", style="white")
    table.add_column("Href", style="dim")

    for entry in summary.navigation:
        table.add_row(str(entry.index + 1), entry.title, entry.href)

    console.print(table)
