"""Extraction of the final round board."""

from __future__ import annotations

from jarchive.common.diagnostics import Diagnostics
from jarchive.common.page_element import PageElement, text_of
from jarchive.common.text import normalize_response
from jarchive.extract.board import BoardResult
from jarchive.extract.clue import extract_image_src
from jarchive.layout import DEFAULT_LAYOUT, PageLayout
from jarchive.models import ERROR_PLACEHOLDER, Board, Category, Clue

FINAL_LOCATION = "final round"


class FinalBoardExtractor:
    """Extracts the single category and clue of the final round.

    Every final round clue is expected to be fully recorded, so a missing
    field is always an error: there is no missing or unrevealed state. The
    clue is wagerable and long-form, and carries no board value.

    Args:
        container: The final round container element.
        layout: Page selectors.
    """

    def __init__(
        self, container: PageElement, layout: PageLayout = DEFAULT_LAYOUT
    ) -> None:
        self.container = container
        self.layout = layout

    def _required_text(
        self, selector: str, class_name: str, errors: Diagnostics
    ) -> tuple[PageElement | None, str]:
        element = self.container.first_css(selector, class_name)
        text = text_of(element)
        if not text:
            errors.add(
                f"could not find class {class_name} in {FINAL_LOCATION}"
            )
            return element, ERROR_PLACEHOLDER
        return element, text

    def extract(self) -> BoardResult:
        errors = Diagnostics()

        _, name = self._required_text(
            self.layout.category_name, "category_name", errors
        )
        clue_text_element, clue = self._required_text(
            self.layout.clue_text, "clue_text", errors
        )

        image_src = None
        if clue_text_element is not None:
            image_src = extract_image_src(
                clue_text_element, self.layout, errors, FINAL_LOCATION
            )

        _, answer = self._required_text(
            self.layout.correct_response, "correct_response", errors
        )
        if answer != ERROR_PLACEHOLDER:
            answer = normalize_response(answer)

        category = Category(
            name=name,
            note="",
            clues=(
                Clue(
                    clue=clue,
                    answer=answer,
                    value=0,
                    wagerable=True,
                    long_form=True,
                    image_src=image_src,
                ),
            ),
        )
        return BoardResult(
            board=Board.from_categories([category]), errors=errors
        )
