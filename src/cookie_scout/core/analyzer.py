"""Page analysis — fetch a URL, then find its cookies, trackers and third-party domains."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import httpx

from cookie_scout.core.base import AnalysisResult
from cookie_scout.core.config import Settings, get_settings
from cookie_scout.core.errors import InvalidUrlError
from cookie_scout.core.fetcher import fetch_page
from cookie_scout.modules.cookies.parser import parse_cookies
from cookie_scout.modules.trackers.detector import detect_trackers, extract_domain

logger = logging.getLogger(__name__)


def normalize_url(url: str) -> str:
    """Prepend https:// unless the URL already starts with http:// or https://."""
    url = url.strip()
    if not url.startswith(("http://", "https://")):
        return f"https://{url}"
    return url


def page_domain(url: str) -> str:
    """Return the host of a normalized target URL, raising InvalidUrlError if it has none."""
    try:
        host = httpx.URL(url).host
    except (httpx.InvalidURL, ValueError) as e:
        raise InvalidUrlError(url) from e
    if not host:
        raise InvalidUrlError(url, "URL has no host")
    return host


def analyze_page(url: str, set_cookie_headers: Iterable[str], html: str) -> AnalysisResult:
    """Analyze an already-fetched page. Never raises."""
    # IP-addressed pages have no domain, so nothing on them is third-party
    domain = extract_domain(url) or ""

    cookies = parse_cookies(set_cookie_headers)
    trackers, third_party = detect_trackers(html, domain)

    logger.info(
        "%s: %d cookies, %d trackers, %d third-party domains",
        url,
        len(cookies),
        len(trackers),
        len(third_party),
    )

    return AnalysisResult(
        url=url,
        cookies=cookies,
        trackers=trackers,
        third_party_domains=third_party,
    )


async def analyze_url(
    url: str,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AnalysisResult:
    """Fetch and analyze one page.

    The only step that can fail a run: raises InvalidUrlError or
    TransportError. Everything after a successful fetch always produces a result.
    """
    settings = settings or get_settings()
    target = normalize_url(url)
    page_domain(target)

    page = await fetch_page(
        target,
        timeout=settings.timeout,
        user_agent=settings.user_agent,
        transport=transport,
    )
    return analyze_page(target, page.set_cookie_headers, page.text)
