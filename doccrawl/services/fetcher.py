import logging
from typing import Optional
from urllib.parse import urlparse

import httpx

from doccrawl.config import ALLOWED_SCHEMES, MAX_CONTENT_SIZE, REQUEST_HEADERS, TIMEOUT

logger = logging.getLogger(__name__)


def _validate_url(url: str) -> None:
    """Raise ValueError if *url* is not an absolute http(s) URL."""
    parsed = urlparse(url)

    if parsed.scheme not in ALLOWED_SCHEMES:
        raise ValueError(f"Scheme '{parsed.scheme}' is not allowed. Use http or https.")

    if not parsed.hostname:
        raise ValueError("URL must have a valid hostname.")


async def _download(url: str, transport: Optional[httpx.AsyncBaseTransport] = None) -> str:
    """GET *url* and return the body as text.

    Raises:
        ValueError: if the URL fails scheme validation.
        httpx.HTTPError: on network errors, timeouts, or non-2xx responses.
        RuntimeError: if the response body exceeds MAX_CONTENT_SIZE.
    """
    _validate_url(url)

    async with httpx.AsyncClient(
        headers=REQUEST_HEADERS,
        timeout=TIMEOUT,
        follow_redirects=True,
        transport=transport,
    ) as client:
        async with client.stream("GET", url) as response:
            response.raise_for_status()

            content_length = response.headers.get("content-length")
            if content_length and int(content_length) > MAX_CONTENT_SIZE:
                raise RuntimeError("Response body exceeds the maximum allowed size.")

            chunks = []
            total = 0
            async for chunk in response.aiter_bytes():
                total += len(chunk)
                if total > MAX_CONTENT_SIZE:
                    raise RuntimeError("Response body exceeds the maximum allowed size.")
                chunks.append(chunk)

            encoding = response.encoding or "utf-8"
            return b"".join(chunks).decode(encoding, errors="replace")


async def fetch_page(
    url: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Optional[str]:
    """Fetch *url* and return the raw HTML, or ``None`` if the request failed.

    Failures (bad scheme, DNS errors, timeouts, non-2xx status, oversized
    bodies) are logged and never raised. There are no retries.
    """
    logger.info("Fetching: %s", url)
    try:
        return await _download(url, transport=transport)
    except (ValueError, httpx.HTTPError, RuntimeError) as exc:
        logger.warning("Error fetching %s: %s", url, exc)
        return None
