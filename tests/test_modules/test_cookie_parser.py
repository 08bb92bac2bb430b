"""Tests for Set-Cookie parsing and cookie categorization."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cookie_scout.core.base import CookieCategory
from cookie_scout.modules.cookies.parser import (
    UNKNOWN_NAME,
    categorize_cookie,
    parse_cookie,
    parse_cookies,
)
from cookie_scout.modules.cookies.patterns import COOKIE_PATTERNS

# ---------------------------------------------------------------------------
# parse_cookie
# ---------------------------------------------------------------------------


def test_parse_full_cookie():
    cookie = parse_cookie("sessionid=abc123; Secure; HttpOnly; SameSite=Strict")
    assert cookie.name == "sessionid"
    assert cookie.secure is True
    assert cookie.http_only is True
    assert cookie.same_site == "strict"
    assert cookie.domain is None
    assert cookie.category == CookieCategory.ESSENTIAL


def test_parse_bare_cookie_has_defaults():
    cookie = parse_cookie("theme=dark")
    assert cookie.name == "theme"
    assert cookie.domain is None
    assert cookie.secure is False
    assert cookie.http_only is False
    assert cookie.same_site is None
    assert cookie.category == CookieCategory.UNKNOWN


def test_domain_is_lowercased():
    cookie = parse_cookie("pref=1; Domain=.Example.COM; Path=/")
    assert cookie.domain == ".example.com"


def test_attribute_names_are_case_insensitive():
    cookie = parse_cookie("a=1;secure;HTTPONLY;samesite=LAX")
    assert cookie.secure is True
    assert cookie.http_only is True
    assert cookie.same_site == "lax"


def test_unrecognized_samesite_kept_as_raw_text():
    assert parse_cookie("a=1; SameSite=Whatever").same_site == "whatever"


def test_unknown_attributes_ignored():
    cookie = parse_cookie(
        "id=42; Expires=Wed, 21 Oct 2026 07:28:00 GMT; Max-Age=3600; Priority=High; Partitioned"
    )
    assert cookie.name == "id"
    assert cookie.secure is False
    assert cookie.http_only is False


def test_name_is_trimmed():
    assert parse_cookie("   spaced  =value; Secure").name == "spaced"


def test_value_with_equals_sign():
    assert parse_cookie("token=a=b=c").name == "token"


def test_secure_must_be_exact():
    # "Secure=false" is not the Secure flag
    assert parse_cookie("a=1; Secure=false").secure is False


@pytest.mark.parametrize("raw", ["", "=value", ";;;", "   ", "; Secure"])
def test_missing_name_uses_sentinel(raw):
    cookie = parse_cookie(raw)
    assert cookie.name == UNKNOWN_NAME
    assert cookie.category == CookieCategory.UNKNOWN


@pytest.mark.parametrize(
    "raw",
    ["\x00\x01garbage", "a=1; domain=", "a=1; samesite=", "====", "x" * 10_000, "é=ü; ß"],
)
def test_parser_never_raises(raw):
    cookie = parse_cookie(raw)
    assert isinstance(cookie.category, CookieCategory)


def test_empty_domain_attribute():
    assert parse_cookie("a=1; Domain=").domain == ""


def test_parse_cookies_keeps_order():
    cookies = parse_cookies(["b=1", "a=2", "_fbp=3"])
    assert [c.name for c in cookies] == ["b", "a", "_fbp"]


# ---------------------------------------------------------------------------
# categorize_cookie
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("sessionid", CookieCategory.ESSENTIAL),
        ("csrftoken", CookieCategory.ESSENTIAL),
        ("XSRF-TOKEN", CookieCategory.ESSENTIAL),
        ("cart_id", CookieCategory.ESSENTIAL),
        ("_ga", CookieCategory.ANALYTICS),
        ("_gid", CookieCategory.ANALYTICS),
        ("_hjSessionUser_123", CookieCategory.ESSENTIAL),
        ("_hjid", CookieCategory.ANALYTICS),
        ("ajs_anonymous_id", CookieCategory.ANALYTICS),
        ("_fbp", CookieCategory.MARKETING),
        ("_gcl_au", CookieCategory.MARKETING),
        ("li_at", CookieCategory.MARKETING),
        ("bcookie", CookieCategory.MARKETING),
        ("twitter_sess", CookieCategory.SOCIAL),
        ("instagram_pref", CookieCategory.SOCIAL),
        ("theme", CookieCategory.UNKNOWN),
    ],
)
def test_categorize(name, expected):
    assert categorize_cookie(name) == expected


def test_first_pattern_in_table_order_wins():
    # Both "session" (Essential) and "_ga" (Analytics) match; "session" is listed first.
    names = [pattern for pattern, _ in COOKIE_PATTERNS]
    assert names.index("session") < names.index("_ga")
    assert categorize_cookie("_ga_session") == CookieCategory.ESSENTIAL
    assert parse_cookie("_ga_session=1").category == CookieCategory.ESSENTIAL


def test_categorization_is_reproducible():
    results = {categorize_cookie("_ga_session") for _ in range(50)}
    assert results == {CookieCategory.ESSENTIAL}


def test_earlier_substring_shadows_later_pattern():
    # "__gads" contains "_ga", which is listed (as Analytics) before "__gads".
    names = [pattern for pattern, _ in COOKIE_PATTERNS]
    assert names.index("_ga") < names.index("__gads")
    assert categorize_cookie("__gads") == CookieCategory.ANALYTICS


def test_uppercase_patterns_never_match_lowercased_names():
    assert categorize_cookie("IDE") == CookieCategory.UNKNOWN
    assert categorize_cookie("NID") == CookieCategory.UNKNOWN


def test_cookie_record_is_immutable():
    cookie = parse_cookie("_fbp=1")
    with pytest.raises(ValidationError):
        cookie.category = CookieCategory.ESSENTIAL  # type: ignore[misc]
