"""URL helpers shared by the noise filter and the name normalizer."""

import re
from urllib.parse import urlsplit, urlunsplit

_HOST_RE = re.compile(r"[\w.-]+")


def split_host_and_path(url: str) -> tuple[str, list[str]]:
    """Return the lowercase host and the non-empty path segments of a URL.

    Scheme-less URLs ("example.com/pricing") are parsed as if they had one.
    Unparseable URLs, or ones whose host is not a plausible hostname, yield
    ("", []).
    """
    candidate = url.strip()
    if "://" not in candidate:
        candidate = f"//{candidate}"

    try:
        parts = urlsplit(candidate)
        host = parts.hostname or ""
    except ValueError:
        return "", []

    if not _HOST_RE.fullmatch(host):
        return "", []

    segments = [segment for segment in parts.path.lower().split("/") if segment]
    return host, segments


def host_matches(host: str, domain: str) -> bool:
    """True if host is the domain itself or one of its subdomains."""
    return host == domain or host.endswith(f".{domain}")


def url_identity(url: str) -> str:
    """Comparison key for a URL: scheme and host lowercased, path and query as-is.

    "HTTPS://Acme.io/Pricing" -> "https://acme.io/Pricing"
    """
    candidate = url.strip()
    try:
        parts = urlsplit(candidate)
    except ValueError:
        return candidate
    return urlunsplit(parts._replace(scheme=parts.scheme.lower(), netloc=parts.netloc.lower()))
