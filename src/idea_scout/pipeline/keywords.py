"""Keyword extraction: turn an idea description into a short search query."""

import re

from idea_scout.consts import MAX_QUERY_KEYWORDS, MIN_KEYWORD_LENGTH, STOP_WORDS

_PUNCTUATION_RE = re.compile(r"[^\w\s-]")


def extract_keywords(description: str) -> str:
    """Extract a search-engine-friendly query from a free-text idea.

    Lowercases, replaces punctuation (hyphens excepted) with spaces, drops
    short tokens and stop words, and keeps the first six survivors in their
    original order.

    Examples:
        "AI-powered study app for college students"
            -> "ai-powered study app college students"
        "Social network for dog owners to meet up"
            -> "social network dog owners meet"

    Args:
        description: Raw idea description

    Returns:
        Space-joined keywords, or "" when nothing usable remains
    """
    if not description:
        return ""

    cleaned = _PUNCTUATION_RE.sub(" ", description.lower())

    keywords = []
    for token in cleaned.split():
        token = token.strip("-")
        if len(token) < MIN_KEYWORD_LENGTH or token in STOP_WORDS:
            continue
        keywords.append(token)
        if len(keywords) == MAX_QUERY_KEYWORDS:
            break

    return " ".join(keywords)


def tokenize_query(query: str) -> list[str]:
    """Split an extracted query back into the tokens used for scoring."""
    return [token for token in query.lower().split() if len(token) >= MIN_KEYWORD_LENGTH]
