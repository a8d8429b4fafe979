"""Noise filter: keep pages that look like products, drop editorial noise.

Raw search results skew toward articles, listicles and directories, so the
filter leans aggressive: a result is excluded by any negative rule and then
kept only if it shows a product signal or looks like a homepage.
"""

from idea_scout.consts import (
    EDITORIAL_PATH_SEGMENTS,
    EXCLUDED_DOMAINS,
    EXCLUDED_TITLE_PHRASES,
    MAX_HOMEPAGE_PATH_SEGMENTS,
    PRODUCT_INDICATORS,
)
from idea_scout.pipeline.urls import host_matches, split_host_and_path
from idea_scout.types.search import RawResult
from idea_scout.utils.logging import setup_logger

logger = setup_logger(__name__)


def is_excluded_domain(host: str) -> bool:
    return any(host_matches(host, domain) for domain in EXCLUDED_DOMAINS)


def is_editorial_path(segments: list[str]) -> bool:
    return any(segment in EDITORIAL_PATH_SEGMENTS for segment in segments)


def is_listicle_title(title: str) -> bool:
    title = title.lower()
    return any(phrase in title for phrase in EXCLUDED_TITLE_PHRASES)


def has_product_signal(result: RawResult) -> bool:
    """True if URL, title or description contains a product indicator."""
    haystacks = (result.url.lower(), result.title.lower(), result.description.lower())
    return any(
        indicator in haystack for indicator in PRODUCT_INDICATORS for haystack in haystacks
    )


def is_homepage_like(segments: list[str]) -> bool:
    return len(segments) <= MAX_HOMEPAGE_PATH_SEGMENTS


def is_competitor_candidate(result: RawResult) -> bool:
    """Apply the exclusion rules, then require a positive signal."""
    host, segments = split_host_and_path(result.url)

    if is_excluded_domain(host):
        logger.debug(f"Filtered out (generic domain): {result.title}", extra={"host": host})
        return False

    if is_editorial_path(segments):
        logger.debug(f"Filtered out (blog/news): {result.title}")
        return False

    if is_listicle_title(result.title):
        logger.debug(f"Filtered out (guide/listicle): {result.title}")
        return False

    # Known precision gaps: a bare marketing homepage passes on shape alone,
    # and so does an unparseable URL ("not a url"), which splits to no segments
    keep = has_product_signal(result) or is_homepage_like(segments)
    if keep:
        logger.debug(f"Kept result: {result.title}")
    return keep


def filter_results(results: list[RawResult]) -> list[RawResult]:
    """Return the likely competitor pages, preserving input order.

    Args:
        results: Raw search results

    Returns:
        Order-preserving subset of ``results``
    """
    if not results:
        return []

    kept = [result for result in results if is_competitor_candidate(result)]

    logger.info(
        f"Noise filter: {len(results)} raw results → {len(kept)} candidates",
        extra={"dropped": len(results) - len(kept)},
    )
    return kept
