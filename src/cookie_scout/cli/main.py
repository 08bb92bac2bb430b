"""CLI entry point — the `cookie-scout` command."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from cookie_scout.core.analyzer import analyze_url, normalize_url
from cookie_scout.core.config import get_settings
from cookie_scout.core.errors import CookieScoutError
from cookie_scout.core.report import render_error, render_header, render_report
from cookie_scout.core.scoring import compute_privacy_score

console = Console()
err_console = Console(stderr=True)


def _run_async(coro: Any) -> Any:
    """Run an async coroutine from a sync Click command."""
    return asyncio.run(coro)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@click.command()
@click.argument("url")
@click.option("--verbose", "-v", is_flag=True, help="Show detailed information about each cookie.")
@click.version_option(package_name="cookie-scout")
def cli(url: str, verbose: bool) -> None:
    """Cookie Scout — analyze a website's cookies, trackers and third-party domains.

    URL is the page to analyze (e.g. https://example.com); https:// is added
    when no scheme is given.
    """
    settings = get_settings()
    _configure_logging(settings.log_level)

    render_header(console)
    target = normalize_url(url)
    console.print(f"  [bright_green]Analyzing:[/bright_green] [bright_cyan]{escape(target)}[/bright_cyan]\n")

    try:
        with console.status("[cyan]Fetching page content...", spinner="dots"):
            result = _run_async(analyze_url(target, settings=settings))
    except CookieScoutError as e:
        render_error(console, str(e), e.tip)
        sys.exit(1)

    render_report(result, compute_privacy_score(result), verbose=verbose, console=console)
