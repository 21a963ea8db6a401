"""Extraction of a standard round board."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from jarchive.common.diagnostics import Diagnostics
from jarchive.common.page_element import PageElement, text_of
from jarchive.common.text import strip_speaker
from jarchive.extract.clue import ClueExtractor, ClueResult
from jarchive.layout import DEFAULT_LAYOUT, PageLayout
from jarchive.models import (
    ERROR_PLACEHOLDER,
    MISSING_PLACEHOLDER,
    Board,
    Category,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardResult:
    """A board and the errors recorded while extracting it."""

    board: Board
    errors: Diagnostics

    def is_empty(self) -> bool:
        """Whether every clue on the board is missing or unrevealed.

        Such a round was never played (or only partially recorded) and is
        left out of the game.
        """
        return all(
            clue.is_empty()
            for category in self.board.categories
            for clue in category.clues
        )


@dataclass
class _CategoryHeader:
    name: str
    note: str
    clues: list[ClueResult]


class BoardExtractor:
    """Extracts the categories and clues of one standard round.

    Clue cells are read in document order, which is row-major: the first
    ``layout.columns`` cells are the top row, left to right.

    Args:
        round_index: 0 for the first standard round, 1 for the second.
        container: The round container element.
        multiplier: Clue value multiplier for the game's air date.
        layout: Page selectors.
    """

    def __init__(
        self,
        round_index: int,
        container: PageElement,
        multiplier: int,
        layout: PageLayout = DEFAULT_LAYOUT,
    ) -> None:
        self.round_index = round_index
        self.container = container
        self.multiplier = multiplier
        self.layout = layout

    def extract(self) -> BoardResult:
        errors = Diagnostics()
        headers = self._extract_categories(errors)

        cells = self.container.query_css(
            self.layout.clue, "clue cells", min_count=0
        )
        for index, cell in enumerate(cells):
            row, column = divmod(index, self.layout.columns)
            if column >= len(headers):
                errors.add(
                    f"could not find category for round {self.round_index}, "
                    f"clue ({row}, {column})"
                )
                continue
            headers[column].clues.append(
                ClueExtractor(
                    cell,
                    row,
                    column,
                    self.round_index,
                    self.multiplier,
                    self.layout,
                ).extract()
            )

        categories = []
        for header in headers:
            for result in header.clues:
                errors.extend(result.errors)
            categories.append(
                Category(
                    name=header.name,
                    note=header.note,
                    clues=tuple(result.clue for result in header.clues),
                )
            )

        logger.debug(
            "Round %d: %d categories, %d clue cells",
            self.round_index,
            len(categories),
            len(cells),
        )
        return BoardResult(
            board=Board.from_categories(categories), errors=errors
        )

    def _extract_categories(
        self, errors: Diagnostics
    ) -> list[_CategoryHeader]:
        category_elements = self.container.query_css(
            self.layout.category, "categories", min_count=0
        )

        headers = []
        for i, category_element in enumerate(category_elements):
            name = text_of(
                category_element.first_css(
                    self.layout.category_name, "category name"
                )
            )
            if not name:
                errors.add(
                    f"could not find class category_name in category {i} "
                    f"round {self.round_index}"
                )
                name = ERROR_PLACEHOLDER
            elif name == self.layout.missing_flag:
                name = MISSING_PLACEHOLDER

            note = text_of(
                category_element.first_css(
                    self.layout.category_note, "category comments"
                )
            )
            if note:
                note = strip_speaker(note)

            headers.append(_CategoryHeader(name=name, note=note, clues=[]))

        return headers
