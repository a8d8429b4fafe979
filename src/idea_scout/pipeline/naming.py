"""Extract a presentable organisation name from a result title or URL."""

from idea_scout.consts import (
    HOST_PREFIXES,
    HOST_VERB_PREFIXES,
    MAX_NAME_LENGTH,
    NAME_SEPARATORS,
    TITLE_FALLBACK_LENGTH,
    UNKNOWN_NAME,
)
from idea_scout.pipeline.urls import split_host_and_path


def name_from_title(title: str) -> str | None:
    """Left-hand side of the first separator that yields a sane name.

    "Quizlet | Flashcards, Learning Tools and More" -> "Quizlet"
    """
    for separator in NAME_SEPARATORS:
        if separator in title:
            name = title.split(separator, 1)[0].strip()
            if 0 < len(name) < MAX_NAME_LENGTH:
                return name
    return None


def name_from_host(host: str) -> str | None:
    """Brand label from a hostname: "www.getnotion.so" -> "Notion"."""
    for prefix in HOST_PREFIXES:
        host = host.removeprefix(prefix)
    for prefix in HOST_VERB_PREFIXES:
        if host.startswith(prefix):
            host = host[len(prefix):]
            break

    label = host.split(".", 1)[0]
    if not label:
        return None
    return label[0].upper() + label[1:]


def extract_name(title: str, url: str) -> str:
    """Extract a clean company name.

    Tries the title separators first, then the URL host, then the first 30
    characters of the title. Never returns an empty string.
    """
    title = title or ""

    name = name_from_title(title)
    if name:
        return name

    host, _ = split_host_and_path(url or "")
    if host:
        name = name_from_host(host)
        if name:
            return name

    return title[:TITLE_FALLBACK_LENGTH].strip() or host or UNKNOWN_NAME
