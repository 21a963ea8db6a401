"""J! Archive game extractor.

This package converts a J! Archive game page into a normalized ``Game``
record. Extraction is defensive: a missing element becomes a placeholder
plus a diagnostic message, never an exception. The one exception is a
title without a parseable air date, which is fatal because no clue value
multiplier can be inferred.

Typical use::

    from jarchive import LxmlPageElement, extract_game

    page = LxmlPageElement.from_html(html_text, url)
    result = extract_game(page)
    print(result.game.to_json())
    if result.error:
        print(result.error)
"""

from jarchive.common.lxml_page_element import LxmlPageElement
from jarchive.extract.game import GameExtractor, extract_game
from jarchive.models import (
    ERROR_PLACEHOLDER,
    MISSING_PLACEHOLDER,
    UNREVEALED_PLACEHOLDER,
    Board,
    Category,
    Clue,
    ExtractionResult,
    Game,
)

__all__ = [
    "ERROR_PLACEHOLDER",
    "MISSING_PLACEHOLDER",
    "UNREVEALED_PLACEHOLDER",
    "Board",
    "Category",
    "Clue",
    "ExtractionResult",
    "Game",
    "GameExtractor",
    "LxmlPageElement",
    "extract_game",
]
