"""Extraction of a whole game page."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from datetime import date, datetime

from jarchive.common.diagnostics import Diagnostics
from jarchive.common.exceptions import TitleDateAssumptionException
from jarchive.common.page_element import PageElement, text_of
from jarchive.extract.board import BoardExtractor
from jarchive.extract.final_board import FinalBoardExtractor
from jarchive.layout import DEFAULT_LAYOUT, PageLayout
from jarchive.models import ERROR_PLACEHOLDER, ExtractionResult, Game

logger = logging.getLogger(__name__)

#: The day clue values were doubled.
VALUE_DOUBLING_DATE = date(2001, 11, 26)

#: Captures the air date, e.g. "Show #3966 - Monday, November 26, 2001"
TITLE_REGEX = re.compile(r"#\d+ - \w+, (\w+ \d+, \d+)")
TITLE_DATE_FORMAT = "%B %d, %Y"


def parse_air_date(title: str) -> date | None:
    """Read the air date out of a game title, or None if there is none."""
    match = TITLE_REGEX.search(title)
    if match is None:
        return None
    try:
        return datetime.strptime(match.group(1), TITLE_DATE_FORMAT).date()
    except ValueError:
        return None


def clue_value_multiplier(
    title: str, page_url: str = "", errors: Sequence[str] = ()
) -> int:
    """Clue value multiplier for the game's air date.

    Games that aired before VALUE_DOUBLING_DATE get 1, later games 2.

    Args:
        title: The game title.
        page_url: Address of the page, for error context.
        errors: Messages already recorded for the page, carried by the
            exception so the underlying cause is not lost.

    Raises:
        TitleDateAssumptionException: If the title has no parseable date.
    """
    air_date = parse_air_date(title)
    if air_date is None:
        raise TitleDateAssumptionException(title, page_url, errors)
    return 1 if air_date < VALUE_DOUBLING_DATE else 2


class GameExtractor:
    """Extracts a game from the root of an archive page.

    Missing elements never abort extraction: they become placeholders and
    messages in the result's error report, ordered root first, then each
    round in play order. A standard round whose clues are all missing or
    unrevealed is left out, as is any round whose container is absent.

    Args:
        page: The document root.
        layout: Page selectors.
        page_url: Address of the page, for error context.

    Raises:
        TitleDateAssumptionException: From ``extract`` if the title has no
            parseable air date. No board is extracted in that case.
    """

    def __init__(
        self,
        page: PageElement,
        layout: PageLayout = DEFAULT_LAYOUT,
        page_url: str = "",
    ) -> None:
        self.page = page
        self.layout = layout
        self.page_url = page_url

    def extract(self) -> ExtractionResult:
        errors = Diagnostics()

        title = text_of(self.page.first_css(self.layout.title, "game title"))
        if not title:
            errors.add("could not find id game_title on page")
            title = ERROR_PLACEHOLDER
        multiplier = clue_value_multiplier(
            title, self.page_url, errors.messages
        )

        note = text_of(self.page.first_css(self.layout.note, "game comments"))

        boards = []
        for round_index, selector in enumerate(self.layout.standard_rounds):
            container = self.page.first_css(selector, f"round {round_index}")
            if container is None:
                logger.debug("No container %s, skipping round", selector)
                continue
            result = BoardExtractor(
                round_index, container, multiplier, self.layout
            ).extract()
            if result.is_empty():
                logger.debug("Round %d has no revealed clues", round_index)
                continue
            boards.append(result.board)
            errors.extend(result.errors)

        final_container = self.page.first_css(
            self.layout.final_round, "final round"
        )
        if final_container is None:
            logger.debug("No container %s", self.layout.final_round)
        else:
            result = FinalBoardExtractor(
                final_container, self.layout
            ).extract()
            boards.append(result.board)
            errors.extend(result.errors)

        game = Game(title=title, note=note, boards=tuple(boards))
        logger.info(
            "Extracted %r: %d boards, %d errors",
            title,
            len(boards),
            len(errors),
        )
        return ExtractionResult(game=game, error=errors.report())


def extract_game(
    page: PageElement, layout: PageLayout = DEFAULT_LAYOUT
) -> ExtractionResult:
    """Extract a game from the root of an archive page.

    Raises:
        TitleDateAssumptionException: If the title has no parseable air date.
    """
    page_url = getattr(page, "url", "")
    return GameExtractor(page, layout, page_url).extract()
