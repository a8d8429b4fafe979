"""Search-related Pydantic schemas."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class RawResult(BaseModel):
    """One web hit as returned by the search service.

    Every field is untrusted: missing or non-string values become "" so a
    malformed hit never fails to parse.
    """

    title: str = Field(default="", description="Title of the search result")
    description: str = Field(default="", description="Snippet/description text")
    url: str = Field(default="", description="URL of the search result, kept verbatim")

    @field_validator("title", "description", "url", mode="before")
    @classmethod
    def coerce_to_str(cls, v: Any) -> str:
        """Coerce None and non-string values to strings."""
        if v is None:
            return ""
        if isinstance(v, str):
            return v
        return str(v)
