"""HTTP utilities for fetching remote resources with retry logic."""

from __future__ import annotations

import asyncio
from typing import Final

import httpx

from wireframe2svg.config import (
    WIREFRAME2SVG_FETCH_BACKOFF_S,
    WIREFRAME2SVG_FETCH_MAX_RETRIES,
    WIREFRAME2SVG_FETCH_TIMEOUT_S,
    WIREFRAME2SVG_USER_AGENT,
)
from wireframe2svg.exceptions import FetchError
from wireframe2svg.utils.logging_config import get_logger

logger = get_logger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


async def fetch_with_retries(url: str, *, client: httpx.AsyncClient | None = None) -> str:
    """Fetch text from a URL, retrying transient failures with exponential backoff.

    Args:
        url: The URL to fetch.
        client: Optional shared client. A short-lived client is created when omitted.

    Returns:
        The response body as text.

    Raises:
        FetchError: On 404 (immediately) or once all retries are exhausted.
    """
    timeout = httpx.Timeout(WIREFRAME2SVG_FETCH_TIMEOUT_S)
    headers = {"User-Agent": WIREFRAME2SVG_USER_AGENT}

    async def do_fetch(http_client: httpx.AsyncClient) -> str:
        last_exc: Exception | None = None

        for attempt in range(WIREFRAME2SVG_FETCH_MAX_RETRIES + 1):
            try:
                response = await http_client.get(url)

                if response.status_code == 404:
                    raise FetchError(f"Resource not found at {url}")

                if response.status_code in RETRY_STATUS_CODES:
                    last_exc = FetchError(f"HTTP {response.status_code} from {url}")
                else:
                    response.raise_for_status()
                    return response.text
            except (httpx.RequestError, httpx.HTTPStatusError) as exc:
                last_exc = exc

            if attempt < WIREFRAME2SVG_FETCH_MAX_RETRIES:
                backoff = WIREFRAME2SVG_FETCH_BACKOFF_S * (2**attempt)
                logger.debug("Retrying %s in %.2fs after: %s", url, backoff, last_exc)
                await asyncio.sleep(backoff)

        raise FetchError(f"Failed to fetch {url}: {last_exc}")

    if client is not None:
        return await do_fetch(client)

    async with httpx.AsyncClient(
        timeout=timeout,
        headers=headers,
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await do_fetch(new_client)
