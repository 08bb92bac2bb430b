"""Errors that abort an analysis run."""

from __future__ import annotations


class CookieScoutError(Exception):
    """Base class for failures of the fetch-and-analyze step."""

    tip = "Make sure the URL is correct and accessible"


class InvalidUrlError(CookieScoutError):
    """Raised when the target cannot be parsed as a URL, even after adding a scheme."""

    tip = "Check the URL for typos, e.g. https://example.com"

    def __init__(self, url: str, reason: str = "Invalid URL format") -> None:
        self.url = url
        super().__init__(f"{reason}: {url}")


class TransportError(CookieScoutError):
    """Raised when the page could not be fetched (network, TLS, timeout)."""

    def __init__(self, url: str, cause: BaseException) -> None:
        self.url = url
        self.cause = cause
        detail = str(cause) or cause.__class__.__name__
        super().__init__(f"Could not fetch {url}: {detail}")
