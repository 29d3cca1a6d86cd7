"""HTML stripping for listing descriptions.

Sources return descriptions as HTML fragments. For display we only want the
readable text, the same thing a browser reports as an element's textContent:
tags are removed and no whitespace is inserted beyond what the markup holds.
"""

from __future__ import annotations

import logging
import warnings
from typing import Optional

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
from bs4.builder import ParserRejectedMarkup

logger = logging.getLogger(__name__)

ELLIPSIS = "..."


def strip_html(text: Optional[str]) -> str:
    """Return the text content of an HTML fragment.

    Already-plain text comes back unchanged. If parsing fails the original
    text is returned rather than raising.
    """
    if not text:
        return ""
    if "<" not in text and "&" not in text:
        return text

    try:
        with warnings.catch_warnings():
            # Plain descriptions that look like a URL or a file name trigger this.
            warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
            soup = BeautifulSoup(text, "html.parser")
        for node in soup(["script", "style"]):
            node.decompose()
        return soup.get_text()
    except (ParserRejectedMarkup, TypeError, ValueError) as exc:
        logger.debug("Could not strip markup, keeping raw text: %s", exc)
        return text


def preview(text: Optional[str], limit: int = 180) -> str:
    """Sanitized text cut to `limit` characters, with an ellipsis when cut."""
    plain = strip_html(text)
    if len(plain) <= limit:
        return plain
    return plain[: max(limit, 0)] + ELLIPSIS
