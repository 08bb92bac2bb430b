"""Page fetcher — one GET request with a browser User-Agent, async httpx."""

from __future__ import annotations

import asyncio
import logging

import httpx
from pydantic import BaseModel, Field

from cookie_scout.core.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from cookie_scout.core.errors import InvalidUrlError, TransportError

logger = logging.getLogger(__name__)


class FetchedPage(BaseModel):
    """What the analysis needs from the HTTP response."""

    url: str  # final URL after redirects
    status_code: int
    set_cookie_headers: list[str] = Field(default_factory=list)
    text: str = ""


def _set_cookie_values(response: httpx.Response) -> list[str]:
    """All Set-Cookie values of a response and the redirects that led to it, in order."""
    values: list[str] = []
    for hop in [*response.history, response]:
        values.extend(hop.headers.get_list("set-cookie"))
    return values


async def fetch_page(
    url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FetchedPage:
    """Fetch a page, following redirects and rejecting invalid TLS certificates.

    Non-2xx responses are returned like any other page. ``timeout`` bounds the
    whole request, redirects and body included. Raises InvalidUrlError or
    TransportError when nothing could be fetched.
    """
    try:
        async with httpx.AsyncClient(
            headers={"User-Agent": user_agent},
            follow_redirects=True,
            timeout=timeout,
            verify=True,
            transport=transport,
        ) as client:
            async with asyncio.timeout(timeout):
                response = await client.get(url)
                text = response.text
    except httpx.InvalidURL as e:
        raise InvalidUrlError(url, str(e)) from e
    except httpx.HTTPError as e:
        raise TransportError(url, e) from e
    except TimeoutError as e:
        raise TransportError(url, e) from e

    logger.debug("Fetched %s → %s (%d)", url, response.url, response.status_code)

    return FetchedPage(
        url=str(response.url),
        status_code=response.status_code,
        set_cookie_headers=_set_cookie_values(response),
        text=text,
    )
