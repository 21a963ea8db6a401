"""Tests for whole-page game extraction."""

import json

import pytest

from jarchive.common.exceptions import (
    ScraperAssumptionException,
    TitleDateAssumptionException,
)
from jarchive.extract.game import (
    VALUE_DOUBLING_DATE,
    GameExtractor,
    clue_value_multiplier,
    extract_game,
    parse_air_date,
)
from jarchive.models import ERROR_PLACEHOLDER, Game
from tests.pages import (
    TITLE_1997,
    MockCategory,
    MockClue,
    MockFinal,
    MockRound,
    blank_round,
    full_game_html,
    game_html,
    page_from,
)


class TestAirDate:
    def test_parse_air_date(self):
        assert parse_air_date("Show #3966 - Monday, November 26, 2001") == (
            VALUE_DOUBLING_DATE
        )

    def test_multiplier_before_cutover(self):
        assert clue_value_multiplier("Show #3965 - Friday, November 23, 2001") == 1

    def test_multiplier_on_cutover(self):
        assert clue_value_multiplier("Show #3966 - Monday, November 26, 2001") == 2

    def test_multiplier_after_cutover(self):
        assert clue_value_multiplier("Show #8000 - Tuesday, May 5, 2019") == 2

    @pytest.mark.parametrize(
        "title",
        [
            "Tournament of Champions",
            "Show #100 - Monday, Smarch 3, 1985",
            ERROR_PLACEHOLDER,
        ],
    )
    def test_unparseable_title_raises(self, title):
        with pytest.raises(TitleDateAssumptionException) as exc_info:
            clue_value_multiplier(title, "https://j-archive.com/x")

        assert exc_info.value.title == title
        assert f"could not parse title {title}" in str(exc_info.value)


class TestGameExtraction:
    def test_full_game(self, game_page):
        result = extract_game(game_page)

        assert result.error is None
        game = result.game
        assert game.title == "J! Archive - Show #4000 - Friday, January 18, 2002"
        assert game.author == "J! Archive"
        assert game.copyright == "Jeopardy!"
        assert game.note == "Tournament of Champions final game."
        assert len(game.boards) == 3
        assert len(game.boards[0].categories) == 6
        assert len(game.boards[2].categories) == 1
        assert game.boards[2].categories[0].clues[0].long_form is True

    def test_note_is_optional(self):
        result = extract_game(page_from(full_game_html()))

        assert result.game.note == ""
        assert result.error is None

    def test_blank_single_round_is_dropped(self):
        result = extract_game(page_from(full_game_html(single=blank_round())))

        assert len(result.game.boards) == 2
        assert result.game.boards[0].category_names[0] == "CATEGORY 0"
        assert result.game.boards[1].categories[0].name == "FINAL CATEGORY"

    def test_blank_double_round_is_dropped(self):
        double = MockRound(
            categories=[MockCategory(name=f"DOUBLE {i}") for i in range(6)],
            clues=blank_round().clues,
        )
        result = extract_game(page_from(full_game_html(double=double)))

        assert len(result.game.boards) == 2
        assert all(
            not name.startswith("DOUBLE")
            for board in result.game.boards
            for name in board.category_names
        )

    def test_errors_of_dropped_round_are_not_reported(self):
        single = blank_round()
        single.categories[0] = MockCategory(name=None)

        result = extract_game(page_from(full_game_html(single=single)))

        assert result.error is None

    def test_missing_containers_are_omitted(self):
        result = extract_game(page_from(game_html(final=MockFinal())))

        assert result.error is None
        assert len(result.game.boards) == 1
        assert result.game.boards[0].categories[0].clues[0].wagerable is True

    def test_no_rounds_at_all(self):
        result = extract_game(page_from(game_html()))

        assert result.game.boards == ()
        assert result.error is None

    def test_final_round_without_clues_is_kept(self):
        result = extract_game(
            page_from(game_html(final=MockFinal(text=None, response=None)))
        )

        assert len(result.game.boards) == 1
        assert result.error is not None

    def test_expected_values_use_title_multiplier(self):
        clues = [MockClue(text=None, response=None, value=None)] * 30
        clues[0] = MockClue(value=None, daily_double="DD: $50")
        page = page_from(
            full_game_html(title=TITLE_1997, double=MockRound(clues=clues))
        )

        board = extract_game(page).game.boards[1]

        # Second standard round, top row, pre-2001 values
        assert board.categories[0].clues[0].value == 200
        assert board.categories[0].clues[4].value == 1000

    def test_errors_are_aggregated_in_round_order(self):
        single_clues = list(MockRound().clues)
        single_clues[0] = MockClue(response=None)
        double_clues = list(MockRound().clues)
        double_clues[29] = MockClue(value="$x")
        page = page_from(
            full_game_html(
                single=MockRound(clues=single_clues),
                double=MockRound(clues=double_clues),
                final=MockFinal(category=None),
            )
        )

        result = extract_game(page)

        assert result.error == "\n".join(
            [
                "could not find class correct_response in round 0, clue (0, 0)",
                "could not parse value of round 1, clue (4, 5): $x",
                "could not find class category_name in final round",
            ]
        )
        # The game is still complete
        assert len(result.game.boards) == 3

    def test_missing_title_is_fatal(self):
        page = page_from(full_game_html(title=None))

        with pytest.raises(TitleDateAssumptionException) as exc_info:
            extract_game(page)

        assert exc_info.value.title == ERROR_PLACEHOLDER
        assert exc_info.value.errors == ("could not find id game_title on page",)
        assert "could not find id game_title on page" in str(exc_info.value)

    def test_unparseable_title_stops_before_boards(self, monkeypatch):
        calls = []
        monkeypatch.setattr(
            "jarchive.extract.game.BoardExtractor.extract",
            lambda self: calls.append(self),
        )
        page = page_from(full_game_html(title="A game with no date"))

        with pytest.raises(ScraperAssumptionException):
            GameExtractor(page).extract()

        assert calls == []

    def test_page_url_in_fatal_error(self):
        page = page_from(
            full_game_html(title="No date"), "https://j-archive.com/showgame.php?game_id=9"
        )

        with pytest.raises(TitleDateAssumptionException) as exc_info:
            extract_game(page)

        assert exc_info.value.page_url == (
            "https://j-archive.com/showgame.php?game_id=9"
        )


class TestSerialization:
    def test_json_round_trip(self, game_page):
        clues = list(MockRound().clues)
        clues[3] = MockClue(value=None, daily_double="DD: $3000")
        clues[4] = MockClue(image_href="https://j-archive.com/media/x.jpg")
        clues[5] = MockClue(text=None, response=None, value=None)
        page = page_from(full_game_html(single=MockRound(clues=clues)))
        game = extract_game(page).game

        restored = Game.from_json(game.to_json())

        assert restored == game

    def test_wire_names(self, game_page):
        data = json.loads(extract_game(game_page).game.to_json())

        assert set(data) == {"title", "author", "copyright", "note", "boards"}
        assert set(data["boards"][0]) == {"categoryNames", "categories"}
        final_clue = data["boards"][2]["categories"][0]["clues"][0]
        assert final_clue == {
            "clue": "The final clue",
            "answer": "What is the final answer?",
            "value": 0,
            "wagerable": True,
            "longForm": True,
        }
        plain_clue = data["boards"][0]["categories"][0]["clues"][0]
        assert set(plain_clue) == {"clue", "answer", "value"}
