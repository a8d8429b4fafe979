"""Type definitions for idea-scout.

This module re-exports all types from submodules for convenient imports.
"""

from idea_scout.types.api import (
    CompetitorSearchRequest,
    CompetitorSearchResponse,
    HealthResponse,
)
from idea_scout.types.competitor import Competitor
from idea_scout.types.search import RawResult

__all__ = [
    # Search
    "RawResult",
    # Competitors
    "Competitor",
    # API
    "CompetitorSearchRequest",
    "CompetitorSearchResponse",
    "HealthResponse",
]
