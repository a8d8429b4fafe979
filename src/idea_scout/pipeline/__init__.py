"""Competitor discovery pipeline: keywords → search → filter → score → rank."""

from idea_scout.pipeline.competitors import CompetitorFinder, find_competitors
from idea_scout.pipeline.keywords import extract_keywords, tokenize_query
from idea_scout.pipeline.naming import extract_name
from idea_scout.pipeline.noise_filter import filter_results
from idea_scout.pipeline.scoring import score_relevance

__all__ = [
    "CompetitorFinder",
    "extract_keywords",
    "extract_name",
    "filter_results",
    "find_competitors",
    "score_relevance",
    "tokenize_query",
]
