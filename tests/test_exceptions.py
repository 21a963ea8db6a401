"""Tests for extraction exception types and the diagnostics collector."""

from jarchive.common.diagnostics import Diagnostics
from jarchive.common.exceptions import (
    HTMLStructuralAssumptionException,
    ScraperAssumptionException,
    TitleDateAssumptionException,
)


class TestScraperAssumptionException:
    def test_attributes(self):
        exc = ScraperAssumptionException(
            message="Round table changed",
            page_url="https://j-archive.com/showgame.php?game_id=1",
            context={"round": 0},
        )

        assert exc.message == "Round table changed"
        assert exc.page_url == "https://j-archive.com/showgame.php?game_id=1"
        assert exc.context == {"round": 0}

    def test_context_defaults_to_empty_dict(self):
        assert ScraperAssumptionException("Round table changed").context == {}

    def test_message_without_url(self):
        assert str(ScraperAssumptionException("Round table changed")) == (
            "Round table changed"
        )

    def test_message_with_url_and_context(self):
        exc = ScraperAssumptionException(
            message="Round table changed",
            page_url="https://j-archive.com/x",
            context={"selector": "td.clue", "count": 0},
        )

        assert str(exc).splitlines() == [
            "Round table changed",
            "URL: https://j-archive.com/x",
            "Context:",
            "  selector: td.clue",
            "  count: 0",
        ]


class TestHTMLStructuralAssumptionException:
    def _exception(self, expected_min, expected_max, actual_count):
        return HTMLStructuralAssumptionException(
            selector="td.category",
            selector_type="css",
            description="categories",
            expected_min=expected_min,
            expected_max=expected_max,
            actual_count=actual_count,
        )

    def test_at_least(self):
        assert "Expected at least 6 elements for 'categories', but found 5" in str(
            self._exception(6, None, 5)
        )

    def test_exactly(self):
        assert "Expected exactly 1" in str(self._exception(1, 1, 0))

    def test_between(self):
        assert "Expected between 1 and 6" in str(self._exception(1, 6, 7))

    def test_context(self):
        exc = self._exception(6, None, 5)

        assert exc.context["selector"] == "td.category"
        assert exc.context["expected_max"] == "unlimited"
        assert exc.context["actual_count"] == 5
        assert isinstance(exc, ScraperAssumptionException)


class TestTitleDateAssumptionException:
    def test_message(self):
        exc = TitleDateAssumptionException("Celebrity Jeopardy!")

        assert exc.title == "Celebrity Jeopardy!"
        assert str(exc) == "could not parse title Celebrity Jeopardy!"
        assert isinstance(exc, ScraperAssumptionException)

    def test_earlier_errors_are_reported(self):
        exc = TitleDateAssumptionException(
            "***ERROR***", errors=["could not find id game_title on page"]
        )

        assert exc.errors == ("could not find id game_title on page",)
        assert exc.context == {
            "errors": "could not find id game_title on page"
        }
        assert str(exc) == (
            "could not parse title ***ERROR***\n"
            "Context:\n"
            "  errors: could not find id game_title on page"
        )


class TestDiagnostics:
    def test_empty_report_is_none(self):
        errors = Diagnostics()

        assert errors.report() is None
        assert not errors
        assert len(errors) == 0

    def test_report_joins_in_order(self):
        errors = Diagnostics()
        errors.add("first")
        child = Diagnostics(["second", "third"])
        errors.extend(child)
        errors.add("fourth")

        assert errors.report() == "first\nsecond\nthird\nfourth"
        assert errors.messages == ("first", "second", "third", "fourth")
        assert bool(errors)

    def test_add_logs_at_debug(self, caplog):
        errors = Diagnostics()

        with caplog.at_level("DEBUG", logger="jarchive"):
            errors.add("could not find id game_title on page")

        assert "could not find id game_title on page" in caplog.text
