"""Competitor schemas returned by the pipeline."""

from pydantic import BaseModel, ConfigDict, Field

from idea_scout.consts import MAX_RELEVANCE_SCORE, MIN_RELEVANCE_SCORE


class Competitor(BaseModel):
    """A ranked competitor ready to be cited by name or shown as a card.

    `relevance_score` serialises as `relevanceScore` (the wire name the
    presentation layer reads).
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Clean organisation name")
    description: str = Field(..., description="Description from the search result")
    url: str = Field(..., description="Original result URL, never rewritten")
    relevance_score: int = Field(
        ...,
        ge=MIN_RELEVANCE_SCORE,
        le=MAX_RELEVANCE_SCORE,
        alias="relevanceScore",
        description="Lexical relevance to the idea (0-100)",
    )
