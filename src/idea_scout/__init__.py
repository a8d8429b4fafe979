"""idea-scout: competitor discovery and relevance ranking for product ideas."""

__version__ = "0.1.0"
