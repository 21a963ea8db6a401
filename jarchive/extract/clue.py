"""Extraction of a single clue cell."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from jarchive.common.diagnostics import Diagnostics
from jarchive.common.page_element import PageElement, text_of
from jarchive.common.text import normalize_response
from jarchive.common.urls import sanitize_url
from jarchive.layout import DEFAULT_LAYOUT, PageLayout
from jarchive.models import (
    ERROR_PLACEHOLDER,
    MISSING_PLACEHOLDER,
    UNREVEALED_PLACEHOLDER,
    Clue,
)

logger = logging.getLogger(__name__)

# Leading digits of a printed value, once "$" and separators are removed
VALUE_REGEX = re.compile(r"\s*(\d+)")


def expected_clue_value(row: int, round_index: int, multiplier: int) -> int:
    """Value of a clue based only on its position on the board.

    Used for daily doubles and unrevealed clues, whose printed value is
    either the wager or absent.
    """
    return 100 * (row + 1) * (round_index + 1) * multiplier


def parse_clue_value(text: str) -> tuple[int, bool]:
    """Parse a printed clue value such as ``$400`` or ``$1,000``.

    Args:
        text: Text of the value element.

    Returns:
        ``(value, ok)``. ``value`` is whatever leading number could be read
        (0 if none) and ``ok`` is False unless the whole text was a number.
    """
    digits = text.strip()
    digits = digits[1:] if digits.startswith("$") else digits
    digits = digits.replace(",", "")
    match = VALUE_REGEX.match(digits)
    if match is None:
        return 0, False
    return int(match.group(1)), not digits[match.end() :].strip()


@dataclass(frozen=True)
class ClueResult:
    """A clue and the errors recorded while extracting it."""

    clue: Clue
    errors: Diagnostics

    def is_empty(self) -> bool:
        return self.clue.is_empty()


class ClueExtractor:
    """Extracts one clue cell of a standard round.

    Args:
        cell: The clue cell element.
        row: Row of the clue on the board, 0 for the top row.
        column: Column of the clue on the board.
        round_index: 0 for the first standard round, 1 for the second.
        multiplier: Clue value multiplier for the game's air date.
        layout: Page selectors.
    """

    def __init__(
        self,
        cell: PageElement,
        row: int,
        column: int,
        round_index: int,
        multiplier: int,
        layout: PageLayout = DEFAULT_LAYOUT,
    ) -> None:
        self.cell = cell
        self.row = row
        self.column = column
        self.round_index = round_index
        self.multiplier = multiplier
        self.layout = layout

    @property
    def location(self) -> str:
        return f"round {self.round_index}, clue ({self.row}, {self.column})"

    def extract(self) -> ClueResult:
        errors = Diagnostics()

        clue_text_element = self.cell.first_css(
            self.layout.clue_text, "clue text"
        )
        clue_text = text_of(clue_text_element)
        unrevealed = False
        if not clue_text:
            unrevealed = True
            clue = UNREVEALED_PLACEHOLDER
        elif clue_text == self.layout.missing_flag:
            clue = MISSING_PLACEHOLDER
        else:
            clue = clue_text

        image_src = None
        if clue_text_element is not None:
            image_src = extract_image_src(
                clue_text_element, self.layout, errors, self.location
            )

        value, wagerable = self._extract_value(errors)
        answer = self._extract_answer(
            unrevealed, clue == MISSING_PLACEHOLDER, errors
        )

        return ClueResult(
            clue=Clue(
                clue=clue,
                answer=answer,
                value=value,
                wagerable=wagerable,
                image_src=image_src,
            ),
            errors=errors,
        )

    def _extract_value(self, errors: Diagnostics) -> tuple[int, bool | None]:
        value_text = text_of(
            self.cell.first_css(self.layout.clue_value, "clue value")
        )
        if value_text:
            value, ok = parse_clue_value(value_text)
            if not ok:
                errors.add(
                    f"could not parse value of {self.location}: {value_text}"
                )
            return value, None

        expected = expected_clue_value(
            self.row, self.round_index, self.multiplier
        )
        dd_text = text_of(
            self.cell.first_css(
                self.layout.clue_value_daily_double, "daily double value"
            )
        )
        if dd_text:
            prefix = self.layout.daily_double_prefix
            if not dd_text.startswith(prefix):
                errors.add(
                    f"DD value of {self.location} does not start with "
                    f"'{prefix}'"
                )
            return expected, True

        return expected, None

    def _extract_answer(
        self, unrevealed: bool, clue_missing: bool, errors: Diagnostics
    ) -> str:
        if unrevealed:
            return UNREVEALED_PLACEHOLDER

        response_text = text_of(
            self.cell.first_css(
                self.layout.correct_response, "correct response"
            )
        )
        if response_text == self.layout.missing_flag:
            return MISSING_PLACEHOLDER
        if not response_text:
            # An unrecorded clue has no response to record either
            if clue_missing:
                return MISSING_PLACEHOLDER
            errors.add(
                f"could not find class correct_response in {self.location}"
            )
            return ERROR_PLACEHOLDER
        return normalize_response(response_text)


def extract_image_src(
    clue_text_element: PageElement,
    layout: PageLayout,
    errors: Diagnostics,
    location: str,
) -> str | None:
    """Sanitize the first media link inside a clue text element.

    Args:
        clue_text_element: The clue text element that may contain links.
        layout: Page selectors.
        errors: Receives a message if the link cannot be sanitized.
        location: Where the clue sits, for the error message.

    Returns:
        The canonical link address, or None if there is no link or it was
        rejected.
    """
    links = clue_text_element.find_links(
        layout.media_link, "clue media links", min_count=0
    )
    if not links:
        return None

    sanitized = sanitize_url(links[0].url)
    if not sanitized.ok:
        errors.add(
            f"could not parse image URL in {location}: {sanitized.error}"
        )
        return None
    logger.debug("Found image %s in %s", sanitized.url, location)
    return sanitized.url
