"""Base class for source connectors.

A connector owns two things: how to reach its endpoint and how to map its
native JSON onto `Listing`. Both halves are failure-isolated: a source that
can't be reached yields no listings, and an item that can't be mapped is
dropped on its own.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx

from ..models import Listing
from ..utils import coerce_text

logger = logging.getLogger(__name__)


class JobSource(ABC):
    """Abstract base class for a job source connector."""

    name: str
    label: str

    def __init__(self, url: str) -> None:
        self.url = url

    async def fetch(self, client: httpx.AsyncClient) -> List[Listing]:
        """Fetch and normalize this source. Never raises; failures yield []."""
        try:
            resp = await client.get(self.url)
            resp.raise_for_status()
            payload = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("%s unavailable, skipping: %s", self.label, exc)
            return []
        return self.normalize(payload)

    def normalize(self, payload: Any) -> List[Listing]:
        """Map a decoded response body onto listings, in the source's order."""
        out: List[Listing] = []
        seen = set()

        for index, item in enumerate(self.extract_items(payload)):
            if not isinstance(item, dict):
                continue
            try:
                listing = self.to_listing(item, index)
            except (TypeError, ValueError, AttributeError, KeyError) as exc:
                logger.debug("%s: dropping malformed item %d: %s", self.label, index, exc)
                continue
            if listing is None:
                continue

            if listing.id in seen:
                listing = listing.model_copy(update={"id": self._free_id(listing.id, seen)})
            seen.add(listing.id)
            out.append(listing)

        return out

    def make_id(self, native_id: Any, index: int) -> str:
        """'<tag>-<native id>', or a per-run sequence id when the source has none."""
        native = coerce_text(native_id)
        if native:
            return f"{self.name}-{native}"
        return f"{self.name}-noid-{index}"

    @staticmethod
    def _free_id(base: str, seen: set) -> str:
        n = 2
        while f"{base}-{n}" in seen:
            n += 1
        return f"{base}-{n}"

    @abstractmethod
    def extract_items(self, payload: Any) -> List[Any]:
        """Return the list of raw job items held in the payload ([] if shape is unexpected)."""
        raise NotImplementedError

    @abstractmethod
    def to_listing(self, item: Dict[str, Any], index: int) -> Optional[Listing]:
        """Map one raw item; return None when it has no title."""
        raise NotImplementedError
