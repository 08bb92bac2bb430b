"""Tests for the console report renderer."""

from __future__ import annotations

import io

from rich.console import Console

from cookie_scout.core.base import AnalysisResult, CookieCategory, CookieRecord, TrackerMatch
from cookie_scout.core.report import DOMAIN_DISPLAY_LIMIT, render_error, render_report, score_bar
from cookie_scout.core.scoring import compute_privacy_score


def _render(result: AnalysisResult, verbose: bool = False) -> str:
    buf = io.StringIO()
    console = Console(file=buf, width=120, color_system=None)
    render_report(result, compute_privacy_score(result), verbose=verbose, console=console)
    return buf.getvalue()


def _busy_result(domains: int = 20) -> AnalysisResult:
    return AnalysisResult(
        url="https://example.com",
        cookies=[
            CookieRecord(name="sessionid", secure=True, http_only=True, same_site="strict",
                         category=CookieCategory.ESSENTIAL),
            CookieRecord(name="_fbp", domain=".example.com", category=CookieCategory.MARKETING),
        ],
        trackers=[
            TrackerMatch(pattern="hubspot", category="Marketing/CRM", description="HubSpot tracking"),
            TrackerMatch(pattern="vwo", category="A/B Testing", description="VWO experiments"),
        ],
        third_party_domains=[f"tracker-{i:02d}.net" for i in range(domains)],
    )


def test_score_bar_width():
    assert score_bar(100) == "█" * 40
    assert score_bar(0) == "░" * 40
    assert score_bar(88) == "█" * 35 + "░" * 5


def test_empty_report():
    out = _render(AnalysisResult(url="https://example.com"))
    assert "Analysis Complete:" in out
    assert "PRIVACY SCORE: 100/100 - EXCELLENT" in out
    assert "No cookies detected on initial page load" in out
    assert "No known trackers detected" in out
    assert "No third-party domains detected" in out
    assert "[OK]" in out


def test_compact_report_caps_domains():
    out = _render(_busy_result(20))
    assert "tracker-00.net" in out
    assert f"tracker-{DOMAIN_DISPLAY_LIMIT - 1:02d}.net" in out
    assert f"tracker-{DOMAIN_DISPLAY_LIMIT:02d}.net" not in out
    assert "... and 5 more" in out
    assert "Use -v for detailed" in out


def test_compact_report_groups_cookies_by_category():
    out = _render(_busy_result())
    assert "Essential (1 cookies)" in out
    assert "Marketing (1 cookies)" in out
    assert "Analytics (" not in out
    assert out.index("Essential (1 cookies)") < out.index("Marketing (1 cookies)")


def test_tracker_prefixes():
    out = _render(_busy_result())
    assert "[CRM] hubspot - HubSpot tracking" in out
    assert "[A/B TEST] vwo - VWO experiments" in out


def test_verbose_report_lists_everything():
    out = _render(_busy_result(20), verbose=True)
    assert "tracker-19.net" in out
    assert "more" not in out.split("THIRD-PARTY DOMAINS")[1]
    assert "Type: External - Third-party resource" in out
    assert "Domain: .example.com" in out
    assert "SameSite: strict" in out
    assert "SameSite: not set" in out
    assert "Purpose: Used for advertising and tracking across sites" in out
    assert "Privacy Impact: High - Tracks users across websites for advertising" in out
    assert "Verbose mode:" in out


def test_unknown_tracker_category_uses_other_prefix():
    result = AnalysisResult(
        url="https://example.com",
        trackers=[TrackerMatch(pattern="x", category="Mystery", description="Unknown thing")],
    )
    out = _render(result, verbose=True)
    assert "[OTHER] x" in out
    assert "Unknown - Impact could not be determined" in out


def test_markup_in_names_is_escaped():
    result = AnalysisResult(
        url="https://example.com",
        cookies=[CookieRecord(name="[bold]weird[/bold]", category=CookieCategory.UNKNOWN)],
    )
    out = _render(result)
    assert "[bold]weird[/bold]" in out


def test_render_error():
    buf = io.StringIO()
    render_error(Console(file=buf, width=120), "Could not fetch https://x.test: boom", "Check it")
    out = buf.getvalue()
    assert "[ERROR]" in out
    assert "Error analyzing URL: Could not fetch https://x.test: boom" in out
    assert "Tip: Check it" in out
