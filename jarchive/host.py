"""Request handling for the page host.

The host owns the loaded page and asks for a parse with a message of the
form ``{"message": "parse"}``. The reply carries the game and, when
anything went wrong, an error report.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from jarchive.common.exceptions import ScraperAssumptionException
from jarchive.common.page_element import PageElement
from jarchive.extract.game import extract_game
from jarchive.layout import DEFAULT_LAYOUT, PageLayout
from jarchive.models import ExtractionResult

logger = logging.getLogger(__name__)

PARSE_MESSAGE = "parse"


def parse_page(
    page: PageElement, layout: PageLayout = DEFAULT_LAYOUT
) -> ExtractionResult:
    """Extract a game, turning a fatal assumption failure into a result.

    Returns:
        The extraction result. When extraction failed outright, ``game`` is
        None and ``error`` holds the failure.
    """
    try:
        return extract_game(page, layout)
    except ScraperAssumptionException as e:
        logger.warning("Extraction failed: %s", e.message)
        return ExtractionResult(game=None, error=str(e))


def handle_message(
    message: Mapping[str, Any],
    page: PageElement,
    layout: PageLayout = DEFAULT_LAYOUT,
) -> dict[str, Any] | None:
    """Answer a host request.

    Args:
        message: The request. Only ``{"message": "parse"}`` is understood.
        page: The document root of the loaded page.
        layout: Page selectors.

    Returns:
        ``{"game": ..., "error": ...}`` for a parse request (``error`` is
        omitted when there is none), or None for any other message.
    """
    if message.get("message") != PARSE_MESSAGE:
        logger.debug("Ignoring message %r", message)
        return None
    return parse_page(page, layout).to_message()
