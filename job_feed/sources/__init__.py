"""Per-source connectors, listed in the order their listings appear in the catalog."""

from __future__ import annotations

from typing import List, Optional

from ..config import Settings, get_settings
from .base import JobSource
from .remoteok import RemoteOkSource
from .remotive import RemotiveSource
from .themuse import MuseSource


def default_sources(settings: Optional[Settings] = None) -> List[JobSource]:
    """The three feed sources in their fixed merge order."""
    settings = settings or get_settings()
    return [
        RemotiveSource(settings.remotive_url),
        MuseSource(settings.muse_url),
        RemoteOkSource(settings.remoteok_url),
    ]


__all__ = ["JobSource", "MuseSource", "RemoteOkSource", "RemotiveSource", "default_sources"]
