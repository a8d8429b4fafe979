"""Brave Web Search gateway.

Issues exactly one request per call and never raises: a missing credential,
a timeout, a rate limit, a non-2xx status or a malformed body all come back
as ``None`` (or ``[]`` when the body simply holds no usable results).
"""

from typing import Any

import httpx

from idea_scout.config import Settings, settings
from idea_scout.tools._http_utils import RateLimitedError, make_api_request
from idea_scout.types.search import RawResult
from idea_scout.utils.logging import setup_logger

logger = setup_logger(__name__)


class BraveSearchClient:
    """Search gateway backed by the Brave Web Search API.

    The credential is injected at construction; use ``from_settings`` to build
    one from the environment.
    """

    def __init__(
        self,
        api_key: str | None,
        api_url: str | None = None,
        timeout: float | None = None,
        count: int | None = None,
    ):
        self.api_key = api_key or ""
        self.api_url = api_url or settings.brave_search_api_url
        self.timeout = timeout or settings.search_timeout
        self.count = count or settings.search_result_count

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> "BraveSearchClient":
        """Build a client from application settings."""
        config = config or settings
        return cls(
            api_key=config.brave_search_api_key,
            api_url=config.brave_search_api_url,
            timeout=config.search_timeout,
            count=config.search_result_count,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def search(self, query: str) -> list[RawResult] | None:
        """Run one web search.

        Args:
            query: Space-separated keywords

        Returns:
            Parsed results, ``[]`` if the body held none, or ``None`` when the
            search could not be performed at all
        """
        if not self.is_configured:
            logger.info("Brave search credential not configured, skipping search")
            return None

        logger.info(f"Calling Brave search: {query}")

        try:
            data = make_api_request(
                self.api_url,
                params={"q": query, "count": self.count},
                headers={
                    "Accept": "application/json",
                    "Accept-Encoding": "gzip",
                    "X-Subscription-Token": self.api_key,
                },
                timeout=self.timeout,
            )
        except RateLimitedError as e:
            logger.warning("Brave search rate limited", extra={"status": e.status_code})
            return None
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Brave search returned an error status",
                extra={"status": e.response.status_code},
            )
            return None
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Brave search failed", extra={"error": str(e)})
            return None
        except Exception as e:
            logger.error(
                f"Unexpected Brave search failure: {e}",
                extra={"error_type": type(e).__name__},
            )
            return None

        results = _parse_results(data)
        logger.info(f"Received {len(results)} results", extra={"query": query})
        return results


def _parse_results(data: Any) -> list[RawResult]:
    """Pull ``web.results`` out of a Brave response body.

    Anything that is not the expected shape counts as "no results".
    """
    web = data.get("web") if isinstance(data, dict) else None
    items = web.get("results") if isinstance(web, dict) else None

    if not isinstance(items, list):
        logger.debug("Response body has no web.results list")
        return []

    parsed = []
    for i, item in enumerate(items, start=1):
        if not isinstance(item, dict):
            logger.debug(f"Skipping malformed result at rank {i}")
            continue
        parsed.append(
            RawResult(
                title=item.get("title"),
                description=item.get("description"),
                url=item.get("url"),
            )
        )

    return parsed
