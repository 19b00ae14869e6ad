#!/usr/bin/env python3
"""Command-line interface for debait.

This CLI is primarily for debugging and trying out configurations.
Feed readers should import debait as a library.
"""

import asyncio
import dataclasses
import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from debait import create_processor
from debait.config import BrandingConfig
from debait.exceptions import DebaitError
from debait.lib.declickbait import (
    collapse_punctuation,
    declickbait,
    repair_shouting,
    soften_exclamations,
)
from debait.lib.routing import branding_url, hash_prefix
from debait.models.entry import FeedEntry
from debait.models.results import BrandingResult
from debait.settings import get_settings

logger = logging.getLogger("debait")


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Configure logging with Rich handler.

    Clears existing handlers first so it can be called more than once.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise use the
            configured level (WARNING by default).
        console: Optional Console instance to use for RichHandler.
            Defaults to stderr so command output stays parseable.
    """
    level = logging.DEBUG if verbose else get_settings().log_level

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=console or Console(stderr=True),
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)


def print_stages(console: Console, title: str) -> None:
    """Print each rewrite stage of a title as a table."""
    repaired = repair_shouting(title)
    collapsed = collapse_punctuation(repaired)
    softened = soften_exclamations(collapsed)

    table = Table(show_header=False, padding=(0, 1))
    table.add_column("Stage", style="bold cyan", width=12)
    table.add_column("Title", overflow="fold")
    table.add_row("Original", escape(title))
    table.add_row("Shouting", escape(repaired))
    table.add_row("Punctuation", escape(collapsed))
    table.add_row("Exclamation", escape(softened))

    console.print()
    console.print(table)


def print_result(console: Console, result: BrandingResult) -> None:
    """Print a processing result as a vertical card."""
    table = Table(show_header=False, padding=(0, 1))
    table.add_column("Field", style="bold cyan", width=12)
    table.add_column("Value", overflow="fold")

    table.add_row("Link", escape(result.link))
    table.add_row("Original", escape(result.original_title))
    if result.video_id:
        table.add_row("Video ID", result.video_id)
        table.add_row("Prefix", hash_prefix(result.video_id))
    if result.applied:
        table.add_row("Title", f"[green]{escape(result.title or '')}[/green]")
        table.add_row("Source", str(result.source))
    elif result.skip_reason:
        table.add_row("Skipped", f"[yellow]{result.skip_reason.label}[/yellow]")

    console.print(table)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """Replace clickbait video titles with curated or rewritten ones."""
    setup_logging(verbose=verbose)


@main.command(name="declickbait")
@click.argument("titles", nargs=-1, required=True, metavar="TITLE...")
@click.option("--stages", is_flag=True, help="Show the output of each stage.")
def declickbait_cmd(titles: tuple[str, ...], stages: bool) -> None:
    """Rewrite titles with the offline fallback rules.

    \b
    Examples:
      debait declickbait "YOU WON'T BELIEVE THIS!!"
      debait declickbait --stages "WHAT?!?"
    """
    console = Console()
    for title in titles:
        if stages:
            print_stages(console, title)
        else:
            console.print(declickbait(title), markup=False, highlight=False)


@main.command(name="prefix")
@click.argument("video_id", metavar="VIDEO_ID")
@click.option("--api-url", help="Branding API base URL (overrides settings).")
def prefix_cmd(video_id: str, api_url: str | None) -> None:
    """Show the hash prefix and routed URL for a video ID.

    \b
    Examples:
      debait prefix dQw4w9WgXcQ
    """
    console = Console()
    base = api_url or get_settings().api_base_url
    try:
        url = branding_url(BrandingConfig(api_base_url=base).api_base_url, video_id)
    except DebaitError as e:
        raise click.ClickException(str(e)) from e
    console.print(f"[cyan]Prefix:[/cyan] {hash_prefix(video_id)}")
    console.print(f"[cyan]URL:[/cyan]    {url}")


@main.command(name="lookup")
@click.argument("url", metavar="URL")
@click.option("--title", default="", help="Original entry title.")
@click.option("--api-url", help="Branding API base URL (overrides settings).")
@click.option("--no-fallback", is_flag=True, help="Disable the fallback rewrite.")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def lookup_cmd(
    url: str,
    title: str,
    api_url: str | None,
    no_fallback: bool,
    as_json: bool,
) -> None:
    """Run the full branding lookup for a single link.

    \b
    Examples:
      debait lookup "https://www.youtube.com/watch?v=VIDEO_ID" --title "WOW!!"
      debait lookup "https://www.youtube.com/watch?v=VIDEO_ID" --no-fallback
    """
    console = Console()

    try:
        config = get_settings().to_config()
        if api_url:
            config = dataclasses.replace(config, api_base_url=api_url)
        if no_fallback:
            config = dataclasses.replace(config, fallback=None)

        result = asyncio.run(_lookup(config, FeedEntry(link=url, title=title)))
    except DebaitError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e
    except Exception as e:
        logger.exception("Unexpected error")
        raise click.ClickException(f"Unexpected error: {e}") from e

    if as_json:
        json.dump(result.model_dump(mode="json"), sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        print_result(console, result)


async def _lookup(config: BrandingConfig, entry: FeedEntry) -> BrandingResult:
    async with create_processor(config) as processor:
        return await processor.process(entry)


if __name__ == "__main__":
    main()
