"""Relevance scoring for competitor candidates."""

from idea_scout.consts import (
    BASE_RELEVANCE_SCORE,
    DESCRIPTION_MATCH_POINTS,
    MAX_RELEVANCE_SCORE,
    MIN_RELEVANCE_SCORE,
    PRODUCT_TERM_POINTS,
    PRODUCT_TERMS,
    SAAS_URL_MARKERS,
    SAAS_URL_POINTS,
    TITLE_MATCH_POINTS,
)
from idea_scout.pipeline.keywords import tokenize_query
from idea_scout.types.search import RawResult
from idea_scout.utils.logging import setup_logger

logger = setup_logger(__name__)


def clamp_score(score: int) -> int:
    """Clamp a raw score to the closed interval [0, 100]."""
    return max(MIN_RELEVANCE_SCORE, min(MAX_RELEVANCE_SCORE, score))


def score_relevance(result: RawResult, query: str) -> int:
    """Score how relevant a search result is to the extracted query.

    Scoring system (0-100):
        - Base score: 50
        - +10 for each query token found in the title
        - +5 for each query token found in the description
        - +15 once if the URL looks like a SaaS product (app., get, use, my.)
        - +10 once if the description uses product terminology

    All tests are plain lowercase substring checks.

    Args:
        result: Candidate search result
        query: Query produced by ``extract_keywords``

    Returns:
        Integer relevance score in [0, 100]
    """
    title = result.title.lower()
    description = result.description.lower()
    url = result.url.lower()
    tokens = tokenize_query(query)

    score = BASE_RELEVANCE_SCORE
    score += TITLE_MATCH_POINTS * sum(1 for token in tokens if token in title)
    score += DESCRIPTION_MATCH_POINTS * sum(1 for token in tokens if token in description)

    if any(marker in url for marker in SAAS_URL_MARKERS):
        score += SAAS_URL_POINTS

    if any(term in description for term in PRODUCT_TERMS):
        score += PRODUCT_TERM_POINTS

    final_score = clamp_score(score)
    logger.debug(f"Relevance {final_score}/100 for {result.title!r}")
    return final_score
