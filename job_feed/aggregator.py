"""Fan-out aggregation across all sources.

All sources are fetched concurrently and joined with all-settled semantics:
the catalog is only built once every source has either produced listings or
failed, and a failed source simply contributes nothing. The merge keeps the
pre-declared source order and each source's native order.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence, Tuple

import httpx

from .config import Settings, get_settings
from .models import Catalog, FacetVocabulary, Listing
from .sources import JobSource, default_sources
from .utils import uniq_preserve_order

logger = logging.getLogger(__name__)


def derive_facets(catalog: Sequence[Listing]) -> FacetVocabulary:
    """Collect the distinct categories, locations and types carried by the catalog."""
    tags: List[str] = []
    locations: List[str] = []
    types: List[str] = []
    for listing in catalog:
        tags.extend(listing.tags)
        locations.append(listing.location)
        if listing.type is not None:
            types.append(listing.type)

    return FacetVocabulary(
        categories=uniq_preserve_order(tags),
        locations=uniq_preserve_order(locations),
        types=uniq_preserve_order(types),
    )


async def _gather(sources: Sequence[JobSource], client: httpx.AsyncClient) -> Catalog:
    results = await asyncio.gather(*(s.fetch(client) for s in sources), return_exceptions=True)

    catalog: Catalog = []
    for source, res in zip(sources, results):
        if isinstance(res, BaseException):
            # fetch() absorbs transport errors itself; anything here is a bug in a connector.
            logger.error("%s failed unexpectedly: %r", source.label, res)
            continue
        logger.debug("%s: %d listings", source.label, len(res))
        catalog.extend(res)
    return catalog


async def aggregate(
    sources: Optional[Sequence[JobSource]] = None,
    client: Optional[httpx.AsyncClient] = None,
    settings: Optional[Settings] = None,
) -> Tuple[Catalog, FacetVocabulary]:
    """Fetch every source concurrently and return (catalog, facets).

    Args:
        sources: Connectors in merge order; defaults to the three feed sources.
        client: Shared HTTP client. When omitted one is created (and closed)
            using the configured timeout and user agent.
        settings: Overrides the cached settings.

    Returns:
        The merged catalog and its facet vocabularies. Never raises for source
        failures; the worst case is an empty catalog with empty facets.
    """
    settings = settings or get_settings()
    if sources is None:
        sources = default_sources(settings)

    if client is not None:
        catalog = await _gather(sources, client)
    else:
        async with httpx.AsyncClient(
            timeout=settings.request_timeout_s,
            follow_redirects=True,
            headers={"User-Agent": settings.user_agent},
        ) as own_client:
            catalog = await _gather(sources, own_client)

    logger.debug("Aggregated %d listings from %d sources", len(catalog), len(sources))
    return catalog, derive_facets(catalog)


def aggregate_sync(
    sources: Optional[Sequence[JobSource]] = None,
    settings: Optional[Settings] = None,
) -> Tuple[Catalog, FacetVocabulary]:
    """Blocking wrapper around `aggregate` for scripts."""
    return asyncio.run(aggregate(sources=sources, settings=settings))
