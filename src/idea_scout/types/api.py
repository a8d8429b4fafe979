"""API request/response schemas for FastAPI endpoints."""

from pydantic import BaseModel, Field

from idea_scout.types.competitor import Competitor


class CompetitorSearchRequest(BaseModel):
    """Request schema for POST /api/competitors."""

    idea: str = Field(..., min_length=1, description="Free-text product idea description")


class CompetitorSearchResponse(BaseModel):
    """Response schema for POST /api/competitors.

    An empty `competitors` list is a valid answer, not an error.
    """

    competitors: list[Competitor] = Field(default_factory=list)
    count: int = Field(default=0, ge=0)
    query: str = Field(default="", description="Keywords extracted from the idea")


class HealthResponse(BaseModel):
    """Response schema for GET /health endpoint."""

    status: str = Field(default="ok")
    search_configured: bool = Field(
        default=False, description="Whether a search credential is configured"
    )
    version: str = Field(default="0.1.0")
