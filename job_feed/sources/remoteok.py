"""Remote OK jobs source connector.

The API returns a bare JSON array. Its first element is a legal notice, not
a job; it has no `position` and is dropped by the title rule like any other
untitled item. Salaries come either as a `salary` string or as numeric
`salary_min`/`salary_max` bounds (0 when unknown). Older items may carry only
the `epoch` posting time, without the ISO `date`.

Docs: https://remoteok.com/api
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..models import Listing
from ..utils import coerce_text, parse_timestamp, string_list
from .base import JobSource


def _salary(item: Dict[str, Any]) -> str:
    """Return the salary string, a range built from the numeric bounds, or 'N/A'."""
    text = coerce_text(item.get("salary"))
    if text:
        return text

    bounds = []
    for key in ("salary_min", "salary_max"):
        val = item.get(key)
        if isinstance(val, (int, float)) and not isinstance(val, bool) and val > 0:
            bounds.append(f"${int(val):,}")
    if bounds:
        return " - ".join(bounds)
    return "N/A"


def _published(item: Dict[str, Any]) -> Optional[str]:
    """ISO `date` when present, else the `epoch` seconds rendered as ISO UTC."""
    date = coerce_text(item.get("date"))
    if date:
        return date
    posted = parse_timestamp(item.get("epoch"))
    return posted.isoformat() if posted else None


class RemoteOkSource(JobSource):
    """Fetch jobs from Remote OK and normalize them."""

    name = "remoteok"
    label = "Remote OK"

    def __init__(self, url: str = "https://remoteok.com/api") -> None:
        super().__init__(url)

    def extract_items(self, payload: Any) -> List[Any]:
        return payload if isinstance(payload, list) else []

    def to_listing(self, item: Dict[str, Any], index: int) -> Optional[Listing]:
        title = coerce_text(item.get("position"))
        if not title:
            return None

        return Listing(
            id=self.make_id(item.get("id"), index),
            title=title,
            company=coerce_text(item.get("company")),
            location=coerce_text(item.get("location")) or "Remote",
            salary=_salary(item),
            url=coerce_text(item.get("url")) or coerce_text(item.get("apply_url")),
            description=coerce_text(item.get("description")),
            tags=string_list(item.get("tags")),
            publication_date=_published(item),
            source=self.label,
        )
