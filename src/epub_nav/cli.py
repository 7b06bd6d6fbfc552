"""Main CLI application."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from epub_nav.commands.inspect import execute_info, execute_toc
from epub_nav.errors import InvalidArchiveError

app = typer.Typer(
    name="epub-nav",
    help="Show EPUB package metadata and reading-order navigation.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()

BookPath = Annotated[
    Path,
    typer.Argument(
        help="Path to the EPUB file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
]
JsonFlag = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Print JSON instead of a formatted view",
    ),
]


@app.command()
def info(book_path: BookPath, as_json: JsonFlag = False) -> None:
    """Display title, language, identifier and ISBNs."""
    try:
        execute_info(book_path, as_json=as_json, console=console)
    except InvalidArchiveError as e:
        console.print(f"[red]Invalid EPUB: {e}[/]")
        raise typer.Exit(1)


@app.command()
def toc(book_path: BookPath, as_json: JsonFlag = False) -> None:
    """Display the table of contents in reading order."""
    try:
        execute_toc(book_path, as_json=as_json, console=console)
    except InvalidArchiveError as e:
        console.print(f"[red]Invalid EPUB: {e}[/]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
