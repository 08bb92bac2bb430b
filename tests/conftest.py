"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest


@pytest.fixture
def clean_html() -> str:
    """A page with only first-party, tracker-free resources."""
    return (
        "<html><head><title>Plain page</title>"
        '<link rel="stylesheet" href="/style.css">'
        "</head><body><p>Hello</p>"
        '<img src="/logo.png" alt="logo">'
        "</body></html>"
    )


@pytest.fixture
def make_transport() -> Callable[..., httpx.MockTransport]:
    """Build an httpx MockTransport serving one page with the given cookies."""

    def _make(
        html: str = "<html></html>",
        cookies: list[str] | None = None,
        status_code: int = 200,
    ) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            headers = [("content-type", "text/html; charset=utf-8")]
            headers += [("set-cookie", value) for value in cookies or []]
            return httpx.Response(status_code, headers=headers, text=html)

        return httpx.MockTransport(handler)

    return _make
