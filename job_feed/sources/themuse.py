"""The Muse jobs source connector.

Public endpoint returning `{"results": [...]}`. Items are nested: the title
is `name`, the company is `company.name`, locations and categories are lists
of `{"name": ...}` objects, and the apply link sits under
`refs.landing_page`. The `type` field describes how the posting is hosted,
not the employment type, so it is not mapped.

Docs: https://www.themuse.com/developers/api/v2
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..models import Listing
from ..utils import coerce_text, text_or
from .base import JobSource


def _names(values: Any) -> List[str]:
    """Pull the `name` of each `{"name": ...}` entry, skipping blanks."""
    if not isinstance(values, list):
        return []
    names = (coerce_text(v.get("name")) for v in values if isinstance(v, dict))
    return [n for n in names if n]


def _nested(item: Dict[str, Any], key: str, field: str) -> Any:
    parent = item.get(key)
    if isinstance(parent, dict):
        return parent.get(field)
    return None


class MuseSource(JobSource):
    """Fetch jobs from The Muse and normalize them."""

    name = "muse"
    label = "The Muse"

    def __init__(self, url: str = "https://www.themuse.com/api/public/jobs?page=1") -> None:
        super().__init__(url)

    def extract_items(self, payload: Any) -> List[Any]:
        if not isinstance(payload, dict):
            return []
        results = payload.get("results")
        return results if isinstance(results, list) else []

    def to_listing(self, item: Dict[str, Any], index: int) -> Optional[Listing]:
        title = coerce_text(item.get("name"))
        if not title:
            return None

        return Listing(
            id=self.make_id(item.get("id"), index),
            title=title,
            company=coerce_text(_nested(item, "company", "name")),
            location=", ".join(_names(item.get("locations"))),
            salary=text_or(item.get("salary"), "N/A"),
            url=coerce_text(_nested(item, "refs", "landing_page")),
            description=coerce_text(item.get("contents")),
            tags=_names(item.get("categories")),
            publication_date=coerce_text(item.get("publication_date")) or None,
            source=self.label,
        )
