"""Tracker detection — scan page markup for tracking services and third-party domains."""

from __future__ import annotations

import ipaddress
import logging
from html.parser import HTMLParser
from urllib.parse import urlsplit

from cookie_scout.core.base import TrackerMatch
from cookie_scout.modules.trackers.signatures import COMPILED_SIGNATURES

logger = logging.getLogger(__name__)


class _Element:
    """A start tag and its attributes."""

    def __init__(self, tag: str, attrs: dict[str, str]) -> None:
        self.tag = tag
        self.attrs = attrs


class PageDocument(HTMLParser):
    """Minimal queryable view of an HTML page: tags, attributes and script bodies."""

    def __init__(self) -> None:
        super().__init__()
        self.elements: list[_Element] = []
        self.scripts: list[str] = []
        self._script_buf: list[str] | None = None

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        attr_dict: dict[str, str] = {}
        for name, value in attrs:
            # Browsers keep the first occurrence of a duplicated attribute
            attr_dict.setdefault(name.lower(), value or "")
        self.elements.append(_Element(tag, attr_dict))

        if tag == "script":
            self._flush_script()
            self._script_buf = []

    def handle_endtag(self, tag: str) -> None:
        if tag == "script":
            self._flush_script()

    def handle_data(self, data: str) -> None:
        if self._script_buf is not None:
            self._script_buf.append(data)

    def close(self) -> None:
        super().close()
        self._flush_script()

    def _flush_script(self) -> None:
        if self._script_buf is not None:
            self.scripts.append("".join(self._script_buf))
            self._script_buf = None

    def select(self, tag: str, attr: str) -> list[str]:
        """Values of ``attr`` on every ``tag`` element that has it (CSS ``tag[attr]``)."""
        return [el.attrs[attr] for el in self.elements if el.tag == tag and attr in el.attrs]

    def script_texts(self) -> list[str]:
        """Raw text of every <script> element, empty for external scripts."""
        return list(self.scripts)


def _offset(markup: str, lineno: int, col: int) -> int:
    """Index into ``markup`` of an HTMLParser (line, column) position."""
    index = 0
    for _ in range(lineno - 1):
        index = markup.find("\n", index) + 1
        if index == 0:
            return len(markup)
    return index + col


def parse_html(markup: str) -> PageDocument:
    """Parse markup into a PageDocument.

    A construct the parser rejects (e.g. an unknown ``<![...]>`` section) is
    skipped up to its closing ``>`` and parsing resumes after it.
    """
    document = PageDocument()
    remaining = markup
    while True:
        try:
            document.feed(remaining)
            document.close()
            return document
        except (AssertionError, ValueError) as e:
            lineno, col = document.getpos()
            logger.warning("Skipping malformed HTML at line %d, column %d: %s", lineno, col, e)
            end = remaining.find(">", _offset(remaining, lineno, col))
            if end == -1:
                return document
            remaining = remaining[end + 1 :]
            document.reset()


def extract_domain(url: str) -> str | None:
    """Return the host name of an absolute URL, or None.

    Relative URLs, protocol-relative URLs, IP-address hosts and anything that
    fails to parse have no domain.
    """
    try:
        parts = urlsplit(url.strip())
        host = parts.hostname
    except ValueError:
        return None
    if not parts.scheme or not host:
        return None
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return host
    return None


def is_third_party(domain: str, page_domain: str) -> bool:
    """Substring-containment check in both directions.

    ``sub.example.com`` and ``example.com`` are related; so, imprecisely, are
    ``notexample.com`` and ``example.com``.
    """
    return not (page_domain in domain or domain in page_domain)


class TrackerScan:
    """State for one whole-page scan: matches found so far and third-party domains.

    Each signature pattern is reported at most once per scan. Create a new
    scan for every page.
    """

    def __init__(self, page_domain: str) -> None:
        self.page_domain = page_domain
        self.trackers: list[TrackerMatch] = []
        self.third_party: set[str] = set()
        self._found: set[str] = set()

    def record_domain(self, url: str) -> None:
        domain = extract_domain(url)
        if domain is None:
            logger.debug("No absolute domain in %r, skipping third-party check", url)
            return
        if is_third_party(domain, self.page_domain):
            self.third_party.add(domain)

    def check_content(self, text: str) -> None:
        """Run every tracker signature against the text."""
        text_lower = text.lower()
        for regex, pattern, category, description in COMPILED_SIGNATURES:
            if pattern in self._found:
                continue
            if regex.search(text_lower):
                self._found.add(pattern)
                self.trackers.append(
                    TrackerMatch(pattern=pattern, category=category, description=description)
                )
                logger.debug("Tracker %r matched (%s)", pattern, category)

    def check_url(self, url: str) -> None:
        """Record the URL's domain if third-party, then check it for trackers."""
        self.record_domain(url)
        self.check_content(url)

    def third_party_domains(self) -> list[str]:
        return sorted(self.third_party)


def scan_document(document: PageDocument, page_domain: str) -> TrackerScan:
    """Scan scripts, inline scripts, images, iframes and links, in that order."""
    scan = TrackerScan(page_domain)

    for src in document.select("script", "src"):
        scan.check_url(src)

    for content in document.script_texts():
        scan.check_content(content)

    # Tracking pixels
    for src in document.select("img", "src"):
        scan.check_url(src)

    for src in document.select("iframe", "src"):
        scan.check_url(src)

    # Stylesheets and other linked resources
    for href in document.select("link", "href"):
        scan.check_url(href)

    return scan


def detect_trackers(markup: str, page_domain: str) -> tuple[list[TrackerMatch], list[str]]:
    """Detect known trackers and third-party domains in a page.

    Returns (trackers in discovery order, sorted unique third-party domains).
    """
    scan = scan_document(parse_html(markup), page_domain)
    return scan.trackers, scan.third_party_domains()
