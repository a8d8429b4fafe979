"""Fixed word lists and limits used by the competitor pipeline."""

# Keyword extraction
MAX_QUERY_KEYWORDS = 6
MIN_KEYWORD_LENGTH = 3
MIN_QUERY_CHARS = 3

STOP_WORDS: frozenset[str] = frozenset(
    {
        # articles / conjunctions / prepositions
        "the", "a", "an", "and", "or", "but", "for", "to", "of",
        "in", "on", "at", "with", "by", "from", "about", "as",
        # auxiliaries
        "is", "are", "was", "were", "be", "been", "being",
        "have", "has", "had", "do", "does", "did", "will", "would",
        "can", "could", "should", "may", "might", "must",
        # pronouns and domain-generic verbs
        "i", "we", "my", "our", "want", "build", "create", "make",
    }
)

# Output
MAX_COMPETITORS = 5
NO_DESCRIPTION = "No description available"

# Noise filter: generic / informational / social hosts
EXCLUDED_DOMAINS: tuple[str, ...] = (
    "wikipedia.org",
    "linkedin.com",
    "facebook.com",
    "twitter.com",
    "crunchbase.com",
    "forbes.com",
    "techcrunch.com",
    "reddit.com",
    "quora.com",
    "youtube.com",
    "medium.com",
    "producthunt.com",  # lists products, is not one
)

# Noise filter: path segments that mark editorial content
EDITORIAL_PATH_SEGMENTS: frozenset[str] = frozenset(
    {
        "blog",
        "news",
        "article",
        "how-to",
        "guide",
        "tutorial",
        "review",
        "vs",
        "comparison",
    }
)

# Noise filter: listicle / tutorial titles
EXCLUDED_TITLE_PHRASES: tuple[str, ...] = ("how to", "guide to", "best")

# Noise filter: positive signals that a page belongs to a product
PRODUCT_INDICATORS: tuple[str, ...] = (
    "pricing",
    "features",
    "demo",
    "signup",
    "sign-up",
    "login",
    "get-started",
    "app.",
    "use",
    "platform",
    "software",
    "tool",
    "product",
)
MAX_HOMEPAGE_PATH_SEGMENTS = 2

# Relevance scoring
BASE_RELEVANCE_SCORE = 50
TITLE_MATCH_POINTS = 10
DESCRIPTION_MATCH_POINTS = 5
SAAS_URL_POINTS = 15
PRODUCT_TERM_POINTS = 10
MIN_RELEVANCE_SCORE = 0
MAX_RELEVANCE_SCORE = 100

SAAS_URL_MARKERS: tuple[str, ...] = ("app.", "get", "use", "my.")
PRODUCT_TERMS: tuple[str, ...] = ("platform", "software", "app", "tool", "service", "solution")

# Name extraction
NAME_SEPARATORS: tuple[str, ...] = (" - ", " | ", ": ", " – ", " — ")
MAX_NAME_LENGTH = 50
TITLE_FALLBACK_LENGTH = 30
HOST_PREFIXES: tuple[str, ...] = ("www.", "app.")
HOST_VERB_PREFIXES: tuple[str, ...] = ("get", "use")
UNKNOWN_NAME = "Unknown"
