"""Data models for the job feed.

Every upstream source is mapped onto one stable `Listing` schema, so the
filter pipeline and the presentation layer never see a source-specific shape.
Models are frozen: a catalog produced by one aggregation run is read-only.

This file uses Pydantic v2.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Listing(BaseModel):
    """A normalized job posting.

    Every field is always present. Sources that omit a value get the safe
    default (empty string, "N/A" or None) rather than a missing attribute.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="'<source-tag>-<native-id>', unique across sources.")
    title: str = ""
    company: str = ""
    location: str = ""
    salary: str = Field(default="N/A", description="Compensation as provided by the source, or 'N/A'.")
    url: str = ""
    description: str = Field(default="", description="Raw text, may contain HTML.")
    tags: List[str] = Field(default_factory=list)
    type: Optional[str] = Field(default=None, description="Employment type, e.g. 'full_time'.")
    publication_date: Optional[str] = Field(
        default=None,
        description="ISO timestamp when available; may be None.",
    )
    source: str = Field(..., description="Human readable origin, e.g. 'Remotive'.")


# The ordered output of one aggregation run.
Catalog = List[Listing]


class FacetVocabulary(BaseModel):
    """Distinct filter values observed in a catalog, in first-seen order."""

    model_config = ConfigDict(frozen=True)

    categories: List[str] = Field(default_factory=list)
    locations: List[str] = Field(default_factory=list)
    types: List[str] = Field(default_factory=list)


class FilterSelection(BaseModel):
    """The consumer's current query.

    An empty string is treated the same as None for the three facet fields,
    which matches how a "All ..." dropdown entry is usually represented.
    """

    model_config = ConfigDict(frozen=True)

    category: Optional[str] = None
    location: Optional[str] = None
    type: Optional[str] = None
    recent_only: bool = False
    search_text: str = ""

    def has_filters(self) -> bool:
        """True when any facet or the recency toggle is active (search excluded)."""
        return bool(self.category or self.location or self.type or self.recent_only)

    def cleared(self) -> "FilterSelection":
        """Reset facets and recency, keeping the search text."""
        return self.model_copy(
            update={"category": None, "location": None, "type": None, "recent_only": False}
        )
