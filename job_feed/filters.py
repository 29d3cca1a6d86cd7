"""The filter pipeline.

Given a catalog and a `FilterSelection`, return the visible listings. Stages
run in a fixed order and each narrows the previous one's output, so a
listing has to pass every active stage. A stage whose selection value is
unset passes everything through.

The pipeline is a pure function: it never mutates the catalog or the
selection and keeps no state between calls.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional, Sequence

from .models import FilterSelection, Listing
from .utils import parse_timestamp

RECENT_WINDOW = timedelta(hours=24)

Predicate = Callable[[Listing], bool]


def _is_recent(listing: Listing, now: datetime) -> bool:
    posted = parse_timestamp(listing.publication_date)
    # Unknown dates are never "recent".
    if posted is None:
        return False
    return now - posted < RECENT_WINDOW


def _matches_text(listing: Listing, needle: str) -> bool:
    return needle in listing.title.lower() or needle in listing.company.lower()


def build_stages(selection: FilterSelection, now: datetime) -> List[Predicate]:
    """Active predicates for a selection, in evaluation order."""
    stages: List[Predicate] = []

    if selection.category:
        category = selection.category
        stages.append(lambda job: category in job.tags)
    if selection.location:
        location = selection.location
        stages.append(lambda job: job.location == location)
    if selection.type:
        job_type = selection.type
        stages.append(lambda job: job.type == job_type)
    if selection.recent_only:
        stages.append(lambda job: _is_recent(job, now))
    if selection.search_text:
        needle = selection.search_text.lower()
        stages.append(lambda job: _matches_text(job, needle))

    return stages


def filter_listings(
    catalog: Sequence[Listing],
    selection: FilterSelection,
    now: Optional[datetime] = None,
) -> List[Listing]:
    """Apply the selection to the catalog, preserving catalog order.

    `now` is the evaluation instant for the recency stage; it defaults to the
    current UTC time. Naive values are taken as UTC.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    filtered = list(catalog)
    for keep in build_stages(selection, now):
        filtered = [job for job in filtered if keep(job)]
    return filtered


def match_count(
    catalog: Sequence[Listing],
    selection: FilterSelection,
    now: Optional[datetime] = None,
) -> int:
    """Number of listings the selection lets through."""
    return len(filter_listings(catalog, selection, now))
