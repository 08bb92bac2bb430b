"""Set-Cookie header parsing — one raw header value to one CookieRecord."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cookie_scout.core.base import CookieCategory, CookieRecord
from cookie_scout.modules.cookies.patterns import COOKIE_PATTERNS

logger = logging.getLogger(__name__)

UNKNOWN_NAME = "unknown"


def categorize_cookie(name: str) -> CookieCategory:
    """Return the category of the first pattern contained in the cookie name."""
    name_lower = name.lower()
    for pattern, category in COOKIE_PATTERNS:
        if pattern in name_lower:
            return category
    return CookieCategory.UNKNOWN


def parse_cookie(raw: str) -> CookieRecord:
    """Parse a raw Set-Cookie value such as ``"sid=abc; Secure; SameSite=Lax"``.

    Never raises: unrecognized attributes are ignored and anything missing
    falls back to defaults (no domain, no flags, Unknown category).
    """
    parts = raw.split(";")
    name = parts[0].split("=", 1)[0].strip() or UNKNOWN_NAME

    domain: str | None = None
    secure = False
    http_only = False
    same_site: str | None = None

    for part in parts[1:]:
        attr = part.strip().lower()
        if attr.startswith("domain="):
            domain = attr.removeprefix("domain=")
        elif attr == "secure":
            secure = True
        elif attr == "httponly":
            http_only = True
        elif attr.startswith("samesite="):
            same_site = attr.removeprefix("samesite=")

    category = categorize_cookie(name)
    logger.debug("Cookie %s categorized as %s", name, category)

    return CookieRecord(
        name=name,
        domain=domain,
        secure=secure,
        http_only=http_only,
        same_site=same_site,
        category=category,
    )


def parse_cookies(headers: Iterable[str]) -> list[CookieRecord]:
    """Parse every Set-Cookie value, keeping header order."""
    return [parse_cookie(raw) for raw in headers]
