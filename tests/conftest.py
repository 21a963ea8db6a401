"""Shared fixtures for extractor tests."""

import pytest

from jarchive.common.lxml_page_element import LxmlPageElement
from tests.pages import (
    MockFinal,
    MockRound,
    full_game_html,
    page_from,
)


@pytest.fixture
def game_page_html() -> str:
    """A fully played game aired after values were doubled.

    Returns:
        HTML string of a page with both standard rounds and the final round.
    """
    return full_game_html(note="Tournament of Champions final game.")


@pytest.fixture
def game_page(game_page_html: str) -> LxmlPageElement:
    """The fully played game, parsed."""
    return page_from(game_page_html, "https://j-archive.com/showgame.php?game_id=1")


@pytest.fixture
def standard_round() -> MockRound:
    return MockRound()


@pytest.fixture
def final_round() -> MockFinal:
    return MockFinal()
