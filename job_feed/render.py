"""Text rendering of the feed for terminals and simple consumers.

The user's profile only shapes the greeting. It is passed in explicitly and
read-only, never looked up from shared state.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .models import Listing
from .sanitize import preview, strip_html

logger = logging.getLogger(__name__)

MAX_CARD_TAGS = 3


class UserProfile(BaseModel):
    """The onboarding profile as persisted by the app (camelCase keys accepted)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: Optional[str] = None
    current_job: Optional[str] = Field(default=None, alias="currentJob")
    goals: Optional[str] = None
    location: Optional[str] = None


def load_profile(path: Union[str, Path]) -> Optional[UserProfile]:
    """Read a saved profile; a missing or unreadable file yields None."""
    p = Path(path).expanduser()
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
        return UserProfile.model_validate(data)
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring profile %s: %s", p, exc)
        return None


def greeting(profile: Optional[UserProfile]) -> str:
    """Header line shown above the feed."""
    p = profile or UserProfile()
    parts = []
    if p.name:
        parts.append(f"Hi, {p.name}! ")
    if p.current_job:
        parts.append(f"Looking to move on from {p.current_job}. ")
    parts.append(f"Goal: {p.goals}" if p.goals else "Find your next opportunity.")
    if p.location:
        parts.append(f"Preferred location: {p.location}.")
    return "".join(parts)


def match_summary(count: int) -> str:
    return f"{count} jobs matched to your profile"


def format_card(listing: Listing, preview_length: int = 180) -> str:
    """Render one listing as a short multi-line card."""
    header = f"{listing.title} @ {listing.company}"
    if listing.type:
        header += f" [{listing.type}]"

    lines: List[str] = [
        header,
        f"  {listing.location} | {listing.salary} | {listing.source}",
    ]
    summary = preview(listing.description, preview_length)
    if summary:
        lines.append(f"  {summary}")
    if listing.tags:
        lines.append("  " + ", ".join(listing.tags[:MAX_CARD_TAGS]))
    if listing.url:
        lines.append(f"  Apply: {listing.url}")
    return "\n".join(lines)


def format_detail(listing: Listing) -> str:
    """Full view of one listing: whole sanitized description and every tag."""
    lines: List[str] = [
        listing.title,
        listing.company,
        f"{listing.location} | {listing.salary} | {listing.source}",
    ]
    if listing.type:
        lines.append(f"Type: {listing.type}")
    if listing.publication_date:
        lines.append(f"Posted: {listing.publication_date}")
    lines.extend(["", "Description", strip_html(listing.description)])
    if listing.tags:
        lines.extend(["", ", ".join(listing.tags)])
    if listing.url:
        lines.extend(["", f"Apply: {listing.url}"])
    return "\n".join(lines)
