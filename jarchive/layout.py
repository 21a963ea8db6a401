"""Selectors and markers of the J! Archive game page.

The archive's markup is not under our control and has drifted over the
years. Everything the extractors look for on the page lives here so that a
layout change is a configuration change.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PageLayout:
    """CSS selectors and text markers used by the extractors.

    Attributes:
        title: Element holding "Show #N - Weekday, Month D, YYYY".
        note: Element holding the game comments.
        single_round: Container of the first standard round.
        double_round: Container of the second standard round.
        final_round: Container of the final round.
        category: One per category header, in reading order.
        category_name: Category name, inside a category.
        category_note: Category comments, inside a category.
        clue: One per clue cell, in reading order.
        clue_text: Clue text, inside a clue cell or the final round.
        clue_value: Printed value, inside a clue cell.
        clue_value_daily_double: Daily double value, inside a clue cell.
        correct_response: Correct response text.
        media_link: Links inside the clue text that carry media.
        missing_flag: Text the archive records for a field it never captured.
        daily_double_prefix: Expected start of the daily double value text.
        columns: Categories per standard round.
    """

    title: str = "#game_title"
    note: str = "#game_comments"
    single_round: str = "#jeopardy_round"
    double_round: str = "#double_jeopardy_round"
    final_round: str = "#final_jeopardy_round"
    category: str = ".category"
    category_name: str = ".category_name"
    category_note: str = ".category_comments"
    clue: str = ".clue"
    clue_text: str = ".clue_text"
    clue_value: str = ".clue_value"
    clue_value_daily_double: str = ".clue_value_daily_double"
    correct_response: str = ".correct_response"
    media_link: str = ".//a"
    missing_flag: str = "="
    daily_double_prefix: str = "DD: "
    columns: int = 6

    @property
    def standard_rounds(self) -> tuple[str, str]:
        """Standard round containers, in round order."""
        return (self.single_round, self.double_round)


DEFAULT_LAYOUT = PageLayout()
