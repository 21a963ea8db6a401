"""jarchive CLI: extract games from saved archive pages.

Usage:
    jarchive parse page.html                      # Print the game JSON
    jarchive parse page.html --output games/      # Also write <title>.jep.json
    jarchive parse - --url https://j-archive.com/showgame.php?game_id=1
    jarchive parse page.html --strict             # Fail on any field error
    jarchive filename "Show #3966 - Monday, November 26, 2001"
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import BinaryIO

import click

from jarchive.common.lxml_page_element import LxmlPageElement
from jarchive.host import parse_page
from jarchive.presentation import download_filename, present


@click.group()
@click.version_option(package_name="jarchive")
def cli() -> None:
    """jarchive: J! Archive game extractor CLI."""


@cli.command()
@click.argument("source", type=click.File("rb"))
@click.option(
    "--url",
    default="",
    help="Address the page was saved from; resolves relative image links.",
)
@click.option(
    "-o",
    "--output",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to write the game file into.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 2 if any field could not be extracted.",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging.")
def parse(
    source: BinaryIO,
    url: str,
    output_dir: Path | None,
    strict: bool,
    verbose: bool,
) -> None:
    """Extract the game from a saved archive page (``-`` for stdin)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    page = LxmlPageElement.from_html(source.read(), url)
    shown = present(parse_page(page).to_message())

    if shown.is_error:
        raise click.ClickException(shown.banner or "")

    click.echo(shown.body)
    if shown.warnings:
        click.echo(shown.warnings, err=True)

    if output_dir is not None and shown.filename:
        output_dir.mkdir(parents=True, exist_ok=True)
        target = output_dir / shown.filename
        target.write_text(shown.body or "", encoding="utf-8")
        click.echo(f"Wrote {target}", err=True)

    if strict and shown.warnings:
        sys.exit(2)


@cli.command()
@click.argument("title")
def filename(title: str) -> None:
    """Print the download file name for a game title."""
    click.echo(download_filename(title))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
