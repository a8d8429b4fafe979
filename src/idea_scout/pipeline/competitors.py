"""Competitor pipeline orchestrator.

Sequences keyword extraction, one web search, noise filtering, scoring and
name extraction into a ranked list of at most five competitors.

The orchestrator never raises. An empty list is the only failure signal the
caller ever sees: it covers a missing credential, a failed or timed-out
search, a filter that removed everything, and internal defects alike.
"""

from typing import Protocol

from idea_scout.consts import MAX_COMPETITORS, MIN_QUERY_CHARS, NO_DESCRIPTION
from idea_scout.pipeline.keywords import extract_keywords
from idea_scout.pipeline.naming import extract_name
from idea_scout.pipeline.noise_filter import filter_results
from idea_scout.pipeline.scoring import score_relevance
from idea_scout.pipeline.urls import url_identity
from idea_scout.tools.brave_search import BraveSearchClient
from idea_scout.types.competitor import Competitor
from idea_scout.types.search import RawResult
from idea_scout.utils.logging import log_with_context, setup_logger

logger = setup_logger(__name__)


class SearchGateway(Protocol):
    """Anything that can run one web search without raising."""

    def search(self, query: str) -> list[RawResult] | None: ...


def deduplicate_by_url(results: list[RawResult]) -> list[RawResult]:
    """Drop repeated URLs, keeping the first (highest-ranked) occurrence.

    Scheme and host compare case-insensitively; paths are case-sensitive.
    """
    seen_urls = set()
    deduplicated = []

    for result in results:
        url_key = url_identity(result.url)
        if url_key in seen_urls:
            logger.debug(f"Skipping duplicate URL: {result.url}")
            continue
        seen_urls.add(url_key)
        deduplicated.append(result)

    return deduplicated


def build_competitor(result: RawResult, query: str) -> Competitor:
    return Competitor(
        name=extract_name(result.title, result.url),
        description=result.description or NO_DESCRIPTION,
        url=result.url,
        relevance_score=score_relevance(result, query),
    )


def rank_competitors(
    competitors: list[Competitor], limit: int = MAX_COMPETITORS
) -> list[Competitor]:
    """Sort by score, best first, and keep the top ``limit``.

    ``sorted`` is stable with ``reverse=True``, so equal scores keep their
    search-result order.
    """
    ranked = sorted(competitors, key=lambda c: c.relevance_score, reverse=True)
    return ranked[:limit]


class CompetitorFinder:
    """Finds and ranks competitors for a product idea."""

    def __init__(self, search_client: SearchGateway | None = None, limit: int = MAX_COMPETITORS):
        self.search_client = search_client or BraveSearchClient.from_settings()
        self.limit = limit

    def find(self, description: str) -> list[Competitor]:
        """Run the pipeline; any unexpected error yields ``[]``."""
        try:
            return self._run(description)
        except Exception:
            logger.exception("Unexpected error in competitor pipeline, returning no competitors")
            return []

    def _run(self, description: str) -> list[Competitor]:
        logger.info(f"Starting competitor search for idea: {description[:100]!r}")

        # Step 1: Keywords
        query = extract_keywords(description)
        if len(query) < MIN_QUERY_CHARS:
            logger.warning("Keywords too short, skipping search", extra={"query": query})
            return []

        # Step 2: Search
        raw_results = self.search_client.search(query)
        if not raw_results:
            logger.warning("No results from search service", extra={"query": query})
            return []

        # Step 3: Filter
        candidates = filter_results(raw_results)
        if not candidates:
            logger.warning("All results filtered out, no competitors found", extra={"query": query})
            return []

        # Step 4: Score and name
        competitors = [
            build_competitor(result, query) for result in deduplicate_by_url(candidates)
        ]

        # Steps 5-6: Rank and truncate
        ranked = rank_competitors(competitors, self.limit)

        log_with_context(
            logger,
            "info",
            f"Returning {len(ranked)} competitors",
            query=query,
            raw_results=len(raw_results),
            candidates=len(candidates),
            names=[c.name for c in ranked],
        )
        return ranked


def find_competitors(
    description: str, search_client: SearchGateway | None = None
) -> list[Competitor]:
    """Find up to five real competitors for a product idea.

    Args:
        description: Free-text idea description
        search_client: Search gateway. If None, a Brave client is built from settings

    Returns:
        Competitors sorted by relevance (best first); ``[]`` on any failure
    """
    try:
        finder = CompetitorFinder(search_client)
    except Exception:
        logger.exception("Could not set up competitor search, returning no competitors")
        return []
    return finder.find(description)
