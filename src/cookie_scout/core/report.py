"""Console report — render an AnalysisResult and its PrivacyScore with Rich."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from cookie_scout.core.base import AnalysisResult, CookieCategory, CookieRecord, PrivacyScore
from cookie_scout.modules.cookies.patterns import CATEGORY_PURPOSES
from cookie_scout.modules.trackers.signatures import classify_domain

BANNER = r"""
   ___            _    _          ___                _
  / __|___  ___  | |__(_)___     / __| __ ___ _  _ _| |_
 | (__/ _ \/ _ \ | / /| / -_)    \__ \/ _/ _ \ || |  _|
  \___\___/\___/ |_\_\|_\___|    |___/\__\___/\_,_|\__|
"""

BAR_WIDTH = 40
DOMAIN_DISPLAY_LIMIT = 15
DIVIDER = "━" * 80

COOKIE_CATEGORY_COLORS: dict[CookieCategory, str] = {
    CookieCategory.ESSENTIAL: "green",
    CookieCategory.ANALYTICS: "yellow",
    CookieCategory.MARKETING: "red",
    CookieCategory.SOCIAL: "blue",
    CookieCategory.UNKNOWN: "white",
}

TRACKER_PREFIXES: dict[str, str] = {
    "Analytics": "[ANALYTICS]",
    "Marketing": "[MARKETING]",
    "Social": "[SOCIAL]",
    "Security": "[SECURITY]",
    "CDN/Security": "[CDN]",
    "Error Tracking": "[ERROR]",
    "Customer Support": "[SUPPORT]",
    "A/B Testing": "[A/B TEST]",
    "Marketing/CRM": "[CRM]",
}

TRACKER_COLORS: dict[str, str] = {
    "Analytics": "yellow",
    "Marketing": "red",
    "Social": "blue",
}

PRIVACY_IMPACT: dict[str, str] = {
    "Marketing": "High - Tracks users across websites for advertising",
    "Marketing/CRM": "High - Tracks users across websites for advertising",
    "Analytics": "Medium - Collects usage data and behavior patterns",
    "Social": "Medium - May share data with social networks",
    "A/B Testing": "Low - Used for page optimization experiments",
    "Security": "Low - Used for site protection",
    "CDN/Security": "Low - Used for site protection",
    "Error Tracking": "Low - Collects error reports for debugging",
    "Customer Support": "Low - Enables support chat functionality",
}

SAMESITE_COLORS = {"strict": "green", "lax": "yellow", "none": "red"}

DISCLAIMER = (
    "The privacy score is a heuristic based on one page load. "
    "It is not a certified privacy metric and may miss dynamically loaded trackers."
)


def render_header(console: Console) -> None:
    console.print(f"[rgb(210,170,120)]{escape(BANNER)}[/rgb(210,170,120)]")
    console.print("[bright_yellow]      Website Cookie & Tracker Analyzer[/bright_yellow]\n")


def render_error(console: Console, message: str, tip: str) -> None:
    """Render a failed analysis: the error and a hint for the user."""
    console.print(f"\n  [bright_red][ERROR][/bright_red] [red]Error analyzing URL: {escape(message)}[/red]\n")
    console.print(f"  [bright_yellow]Tip:[/bright_yellow] {escape(tip)}\n")


def score_bar(score: int, width: int = BAR_WIDTH) -> str:
    """Proportional bar: one filled cell per ``100 / width`` points."""
    filled = score * width // 100
    return "█" * filled + "░" * (width - filled)


def _section(console: Console, title: str) -> None:
    console.print(f"\n  [bold bright_white]{title}[/bold bright_white]")
    console.print(f"[bright_black]{DIVIDER}[/bright_black]")


def _render_summary(console: Console, result: AnalysisResult, score: PrivacyScore) -> None:
    console.print(
        Panel(
            f"[bright_yellow]Cookies:[/bright_yellow] {len(result.cookies):<20} "
            f"[bright_red]Trackers:[/bright_red] {len(result.trackers):<20} "
            f"[bright_blue]3rd Party:[/bright_blue] {len(result.third_party_domains)}",
            width=77,
        )
    )
    color = score.color
    console.print(
        Panel(
            f"PRIVACY SCORE: {score.score}/100 - [{color}]{score.label}[/{color}]\n"
            f"[[{color}]{score_bar(score.score)}[/{color}]]",
            width=77,
        )
    )


def _render_cookie(console: Console, cookie: CookieRecord) -> None:
    console.print(f"  │   • [bright_white]{escape(cookie.name)}[/bright_white]")
    if cookie.domain:
        console.print(f"  │       [bright_black]Domain:[/bright_black] [cyan]{escape(cookie.domain)}[/cyan]")

    secure = "[green]Yes[/green]" if cookie.secure else "[red]No[/red]"
    console.print(f"  │       [bright_black]Secure:[/bright_black] {secure}")
    http_only = "[green]Yes[/green]" if cookie.http_only else "[yellow]No[/yellow]"
    console.print(f"  │       [bright_black]HttpOnly:[/bright_black] {http_only}")

    same_site = cookie.same_site or "not set"
    style = SAMESITE_COLORS.get(same_site.lower(), "bright_black")
    console.print(f"  │       [bright_black]SameSite:[/bright_black] [{style}]{escape(same_site)}[/{style}]")

    purpose = CATEGORY_PURPOSES[cookie.category]
    console.print(f"  │       [bright_black]Purpose: {purpose}[/bright_black]")
    console.print("  │")


def _render_cookies(console: Console, result: AnalysisResult, verbose: bool) -> None:
    _section(console, "COOKIES DETECTED")
    if not result.cookies:
        console.print("  [green][OK][/green] No cookies detected on initial page load")
        return

    for category, cookies in result.cookies_by_category().items():
        if not cookies:
            continue
        color = COOKIE_CATEGORY_COLORS[category]
        console.print(
            f"  ├─ [{color}]{category.value}[/{color}] "
            f"[bright_black]({len(cookies)} cookies)[/bright_black]"
        )
        for cookie in cookies:
            if verbose:
                _render_cookie(console, cookie)
            else:
                console.print(f"  │   • [bright_white]{escape(cookie.name)}[/bright_white]")


def _render_trackers(console: Console, result: AnalysisResult, verbose: bool) -> None:
    _section(console, "TRACKERS DETECTED")
    if not result.trackers:
        console.print("  [green][OK][/green] No known trackers detected")
        return

    for tracker in result.trackers:
        color = TRACKER_COLORS.get(tracker.category, "white")
        prefix = escape(TRACKER_PREFIXES.get(tracker.category, "[OTHER]"))
        name = escape(tracker.pattern)
        if verbose:
            impact = PRIVACY_IMPACT.get(tracker.category, "Unknown - Impact could not be determined")
            console.print(f"  [{color}]{prefix}[/{color}] [bright_white]{name}[/bright_white]")
            console.print(f"       [bright_black]Description:[/bright_black] [cyan]{tracker.description}[/cyan]")
            console.print(f"       [bright_black]Privacy Impact: {impact}[/bright_black]\n")
        else:
            console.print(
                f"  [{color}]{prefix}[/{color}] [bright_white]{name}[/bright_white] - "
                f"[bright_black]{tracker.description}[/bright_black]"
            )


def _render_domains(console: Console, result: AnalysisResult, verbose: bool) -> None:
    _section(console, "THIRD-PARTY DOMAINS")
    domains = result.third_party_domains
    if not domains:
        console.print("  [green][OK][/green] No third-party domains detected")
        return

    shown = domains if verbose else domains[:DOMAIN_DISPLAY_LIMIT]
    for i, domain in enumerate(shown, 1):
        console.print(f"  {i}. [bright_cyan]{escape(domain)}[/bright_cyan]")
        if verbose:
            kind, explanation = classify_domain(domain)
            console.print(
                f"      [bright_black]Type:[/bright_black] [yellow]{kind}[/yellow] - "
                f"[bright_black]{explanation}[/bright_black]"
            )

    hidden = len(domains) - len(shown)
    if hidden > 0:
        console.print(f"  ... and [bright_yellow]{hidden}[/bright_yellow] more")


def render_report(
    result: AnalysisResult,
    score: PrivacyScore,
    verbose: bool = False,
    console: Console | None = None,
) -> None:
    """Print the full report. Verbose mode adds per-item details and every domain."""
    console = console or Console()

    console.print(f"\n[bright_black]{DIVIDER}[/bright_black]")
    console.print(
        f"  [bright_blue]Analysis Complete:[/bright_blue] [bold bright_white]{escape(result.url)}[/bold bright_white]"
    )
    console.print(f"[bright_black]{DIVIDER}[/bright_black]\n")

    _render_summary(console, result, score)
    _render_cookies(console, result, verbose)
    _render_trackers(console, result, verbose)
    _render_domains(console, result, verbose)

    console.print(f"\n[bright_black]{DIVIDER}[/bright_black]")
    if verbose:
        console.print(
            "  [bright_green]Verbose mode:[/bright_green] "
            "[bright_black]Showing detailed information for all items[/bright_black]"
        )
    else:
        console.print(
            "  [bright_yellow]Tip:[/bright_yellow] "
            "[bright_black]Use -v for detailed cookie, tracker, and domain information[/bright_black]"
        )
    console.print(f"  [dim]{DISCLAIMER}[/dim]")
    console.print(f"[bright_black]{DIVIDER}[/bright_black]\n")
