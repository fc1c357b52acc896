"""
HTTP fetch collaborator. Returns the body of a 200 OK response as text.
"""

import logging
from typing import Optional

import httpx

from analyzer.config import Config

logger = logging.getLogger("html-analyzer.fetcher")


class FetchError(Exception):
    """Non-200 response or connection failure."""

    def __init__(self, url: str, status_code: Optional[int] = None, reason: str = ""):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        if status_code is not None:
            message = f"URL connection error with response code: {status_code}"
        else:
            message = f"Failed to connect to URL: {reason}"
        super().__init__(message)


async def fetch_document(url: str, timeout: Optional[float] = None,
                         user_agent: Optional[str] = None) -> str:
    """GET url and return the response body. Raises FetchError unless the status is 200."""
    try:
        async with httpx.AsyncClient(
            timeout=timeout if timeout is not None else Config.TIMEOUT,
            follow_redirects=True,
            headers={"User-Agent": user_agent or Config.USER_AGENT},
        ) as client:
            resp = await client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.info(f"GET {url} failed: {e}")
        raise FetchError(url, reason=str(e) or type(e).__name__) from e

    if resp.status_code != httpx.codes.OK:
        logger.info(f"GET {url} returned {resp.status_code}")
        raise FetchError(url, status_code=resp.status_code)

    logger.info(f"Fetched {len(resp.text)} characters from {url}")
    return resp.text


async def fetch_lines(url: str, **kwargs) -> list[str]:
    """Fetch url and split the body into lines."""
    return (await fetch_document(url, **kwargs)).splitlines()
