"""Shared HTTP helpers for outbound search requests."""

import json
import time
from typing import Any

import httpx

from idea_scout.config import settings
from idea_scout.utils.logging import setup_logger

logger = setup_logger(__name__)


class RateLimitedError(Exception):
    """The search service refused the request because of rate limiting (HTTP 429)."""

    def __init__(self, message: str, status_code: int = 429):
        super().__init__(message)
        self.status_code = status_code


def make_api_request(
    url: str,
    params: dict,
    headers: dict | None = None,
    timeout: float | None = None,
    rate_limit_statuses: tuple[int, ...] = (429,),
) -> Any:
    """Make a single HTTP GET request and return the parsed JSON body.

    ``timeout`` bounds the whole call, not just each connect or read. httpx
    applies its timeout per I/O step, so the body is streamed and checked
    against an overall deadline after every chunk.

    Args:
        url: API endpoint URL
        params: Query parameters for the GET request (URL-encoded by httpx)
        headers: Extra request headers
        timeout: Overall time limit in seconds. If None, uses settings.search_timeout
        rate_limit_statuses: HTTP status codes that indicate rate limiting

    Returns:
        Parsed JSON response

    Raises:
        RateLimitedError: If response status code is in rate_limit_statuses
        httpx.TimeoutException: If any step or the call as a whole runs past the timeout
        httpx.HTTPError: For other transport or HTTP status errors
        ValueError: If the body is not valid JSON
    """
    timeout = timeout or settings.search_timeout
    deadline = time.monotonic() + timeout

    try:
        with httpx.Client(timeout=timeout) as client:
            with client.stream("GET", url, params=params, headers=headers) as response:
                if response.status_code in rate_limit_statuses:
                    raise RateLimitedError(
                        f"Rate limit exceeded (status: {response.status_code})",
                        status_code=response.status_code,
                    )

                response.raise_for_status()

                body = bytearray()
                for chunk in response.iter_bytes():
                    body.extend(chunk)
                    if time.monotonic() > deadline:
                        raise httpx.ReadTimeout(
                            f"Response not complete within {timeout}s",
                            request=response.request,
                        )

        return json.loads(bytes(body))

    except httpx.TimeoutException:
        logger.error(f"Request timed out after {timeout}s", extra={"url": url})
        raise
    except httpx.HTTPError as e:
        logger.error(
            "HTTP error during API request",
            extra={"url": url, "error": str(e)},
        )
        raise
