"""Utility helpers shared across the feed."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional


def coerce_text(value: Any) -> str:
    """Return a stripped string for str/int/float values, else ''."""
    if isinstance(value, bool) or value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def text_or(value: Any, default: str) -> str:
    return coerce_text(value) or default


def string_list(values: Any) -> List[str]:
    """Keep the string entries of a list, in order, duplicates included."""
    if not isinstance(values, list):
        return []
    return [v for v in values if isinstance(v, str)]


def uniq_preserve_order(items: Iterable[Optional[str]]) -> List[str]:
    """Deduplicate exact values while preserving first-seen order; drops falsy items."""
    seen = set()
    out: List[str] = []
    for it in items:
        if not it or it in seen:
            continue
        seen.add(it)
        out.append(it)
    return out


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-like string or epoch number into an aware UTC datetime.

    Naive timestamps are assumed to be UTC. Returns None when the value can't
    be interpreted.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        ts = float(value)
        # Some APIs return epoch in ms; convert if so.
        if ts > 1e12:
            ts /= 1000.0
        try:
            return datetime.fromtimestamp(ts, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    if not isinstance(value, str):
        return None
    value = value.strip()
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
