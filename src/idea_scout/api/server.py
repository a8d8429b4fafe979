"""FastAPI server for idea-scout.

Endpoints:
    POST /api/competitors - Ranked competitors for a product idea
    GET /health - Health check
"""

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from idea_scout import __version__
from idea_scout.config import settings
from idea_scout.pipeline import extract_keywords, find_competitors
from idea_scout.tools.brave_search import BraveSearchClient
from idea_scout.types.api import (
    CompetitorSearchRequest,
    CompetitorSearchResponse,
    HealthResponse,
)
from idea_scout.utils.logging import setup_logger

logger = setup_logger(__name__)

app = FastAPI(
    title="idea-scout API",
    description="Competitor discovery for product idea validation.",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_search_client() -> BraveSearchClient:
    """Search client dependency, built from settings per request."""
    return BraveSearchClient.from_settings()


@app.post("/api/competitors", response_model=CompetitorSearchResponse)
def search_competitors(
    request: CompetitorSearchRequest,
    search_client: BraveSearchClient = Depends(get_search_client),
) -> CompetitorSearchResponse:
    """Find competitors for an idea.

    Search failures are not errors: they produce an empty list with status 200.
    """
    if not request.idea.strip():
        raise HTTPException(status_code=400, detail="Idea description cannot be empty")

    competitors = find_competitors(request.idea, search_client=search_client)

    return CompetitorSearchResponse(
        competitors=competitors,
        count=len(competitors),
        query=extract_keywords(request.idea),
    )


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="ok",
        search_configured=bool(settings.brave_search_api_key),
        version=__version__,
    )
