"""Remotive jobs source connector.

Remotive provides a public JSON endpoint: `{"jobs": [...]}`. Items carry
`title`, `company_name`, `candidate_required_location`, a free-form `salary`,
an HTML `description`, `tags`, `job_type` and a naive ISO `publication_date`
like "2024-01-01T12:34:56".

Docs: https://remotive.com/api/remote-jobs

Note: Free APIs can change; treat this as a pluggable connector.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..models import Listing
from ..utils import coerce_text, string_list, text_or
from .base import JobSource


class RemotiveSource(JobSource):
    """Fetch jobs from Remotive and normalize them."""

    name = "remotive"
    label = "Remotive"

    def __init__(self, url: str = "https://remotive.com/api/remote-jobs") -> None:
        super().__init__(url)

    def extract_items(self, payload: Any) -> List[Any]:
        if not isinstance(payload, dict):
            return []
        jobs = payload.get("jobs")
        return jobs if isinstance(jobs, list) else []

    def to_listing(self, item: Dict[str, Any], index: int) -> Optional[Listing]:
        title = coerce_text(item.get("title"))
        if not title:
            return None

        return Listing(
            id=self.make_id(item.get("id"), index),
            title=title,
            company=coerce_text(item.get("company_name")),
            location=coerce_text(item.get("candidate_required_location")),
            salary=text_or(item.get("salary"), "N/A"),
            url=coerce_text(item.get("url")),
            description=coerce_text(item.get("description")),
            tags=string_list(item.get("tags")),
            type=coerce_text(item.get("job_type")) or None,
            publication_date=coerce_text(item.get("publication_date")) or None,
            source=self.label,
        )
