"""Reduce Congressional Record HTML to plain text lines."""
from __future__ import annotations

import logging
import warnings

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning

LOGGER = logging.getLogger(__name__)


def reduce_markup(markup: str) -> str:
    """Return the text of all ``<pre>`` blocks, or the body text as a fallback.

    GovInfo publishes the fixed-width record inside ``<pre>`` elements; each
    block is followed by a newline so consecutive blocks never share a line.
    """

    with warnings.catch_warnings():
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        soup = BeautifulSoup(markup, "html.parser")

    content = "".join(block.get_text() + "\n" for block in soup.find_all("pre"))
    if content.strip():
        return content

    LOGGER.debug("No <pre> content found, falling back to document text")
    root = soup.body or soup
    return root.get_text()


__all__ = ["reduce_markup"]
