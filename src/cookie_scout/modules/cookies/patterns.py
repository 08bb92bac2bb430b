"""Cookie name patterns used to guess a cookie's purpose."""

from __future__ import annotations

from cookie_scout.core.base import CookieCategory

# (substring, category), checked in order against the lower-cased cookie name.
# First match wins, so order matters: "_ga_session" is Essential because
# "session" comes before "_ga". "IDE" and "NID" are kept upper-case; they never
# match a lower-cased name.
COOKIE_PATTERNS: tuple[tuple[str, CookieCategory], ...] = (
    # Essential
    ("session", CookieCategory.ESSENTIAL),
    ("csrf", CookieCategory.ESSENTIAL),
    ("xsrf", CookieCategory.ESSENTIAL),
    ("auth", CookieCategory.ESSENTIAL),
    ("login", CookieCategory.ESSENTIAL),
    ("token", CookieCategory.ESSENTIAL),
    ("cart", CookieCategory.ESSENTIAL),
    ("consent", CookieCategory.ESSENTIAL),
    # Analytics
    ("_ga", CookieCategory.ANALYTICS),
    ("_gid", CookieCategory.ANALYTICS),
    ("_gat", CookieCategory.ANALYTICS),
    ("_utm", CookieCategory.ANALYTICS),
    ("amplitude", CookieCategory.ANALYTICS),
    ("mixpanel", CookieCategory.ANALYTICS),
    ("mp_", CookieCategory.ANALYTICS),
    ("ajs_", CookieCategory.ANALYTICS),
    ("hubspot", CookieCategory.ANALYTICS),
    ("_hj", CookieCategory.ANALYTICS),
    ("_clck", CookieCategory.ANALYTICS),
    ("_clsk", CookieCategory.ANALYTICS),
    # Marketing
    ("_fbp", CookieCategory.MARKETING),
    ("_fbc", CookieCategory.MARKETING),
    ("fr", CookieCategory.MARKETING),
    ("ads", CookieCategory.MARKETING),
    ("_gcl", CookieCategory.MARKETING),
    ("gclid", CookieCategory.MARKETING),
    ("IDE", CookieCategory.MARKETING),
    ("NID", CookieCategory.MARKETING),
    ("__gads", CookieCategory.MARKETING),
    ("_pin_", CookieCategory.MARKETING),
    ("li_", CookieCategory.MARKETING),
    ("bcookie", CookieCategory.MARKETING),
    # Social
    ("facebook", CookieCategory.SOCIAL),
    ("twitter", CookieCategory.SOCIAL),
    ("linkedin", CookieCategory.SOCIAL),
    ("instagram", CookieCategory.SOCIAL),
)

CATEGORY_PURPOSES: dict[CookieCategory, str] = {
    CookieCategory.ESSENTIAL: "Required for basic site functionality",
    CookieCategory.ANALYTICS: "Used to track user behavior and site performance",
    CookieCategory.MARKETING: "Used for advertising and tracking across sites",
    CookieCategory.SOCIAL: "Related to social media integrations",
    CookieCategory.UNKNOWN: "Purpose could not be determined",
}
