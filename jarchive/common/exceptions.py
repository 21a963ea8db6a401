"""Exception types for extraction errors.

Field-level problems are never raised: they become placeholders plus a
message in a Diagnostics report. Exceptions are reserved for assumptions
whose violation leaves no sensible partial result.
"""

from collections.abc import Sequence
from typing import Any


class ScraperAssumptionException(Exception):
    """Base class for page assumption violations.

    The extractor makes assumptions about the archive page structure and
    data formats. When an assumption is violated badly enough that no
    best-effort result can be produced, a subclass of this exception is
    raised with context that helps diagnose the issue.
    """

    def __init__(
        self,
        message: str,
        page_url: str = "",
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable description of the assumption violation.
            page_url: The URL of the page being extracted, if known.
            context: Optional dict of additional context (selector, counts, etc).
        """
        self.message = message
        self.page_url = page_url
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context.

        Returns:
            Formatted error message string.
        """
        parts = [self.message]
        if self.page_url:
            parts.append(f"URL: {self.page_url}")

        if self.context:
            parts.append("Context:")
            for key, value in self.context.items():
                parts.append(f"  {key}: {value}")

        return "\n".join(parts)


class HTMLStructuralAssumptionException(ScraperAssumptionException):
    """Raised when HTML structure doesn't match a hard expectation.

    Checked queries raise this when a selector returns a different number
    of elements than the caller declared. Extractors query with
    ``min_count=0`` and treat absence as data, so this only surfaces when
    code states an explicit count requirement.

    Attributes:
        selector: The XPath or CSS selector that was used.
        selector_type: Type of selector ("xpath" or "css").
    """

    def __init__(
        self,
        selector: str,
        selector_type: str,
        description: str,
        expected_min: int,
        expected_max: int | None,
        actual_count: int,
        page_url: str = "",
    ) -> None:
        """Initialize the exception.

        Args:
            selector: The XPath or CSS selector that was used.
            selector_type: Type of selector ("xpath" or "css").
            description: Human-readable description of what was being selected.
            expected_min: Minimum number of elements expected.
            expected_max: Maximum number of elements expected (None = unlimited).
            actual_count: Actual number of elements found.
            page_url: The URL of the page, if known.
        """
        self.selector = selector
        self.selector_type = selector_type
        self.description = description
        self.expected_min = expected_min
        self.expected_max = expected_max
        self.actual_count = actual_count

        if expected_max is None:
            expected_str = f"at least {expected_min}"
        elif expected_min == expected_max:
            expected_str = f"exactly {expected_min}"
        else:
            expected_str = f"between {expected_min} and {expected_max}"

        message = (
            f"HTML structure mismatch: Expected {expected_str} "
            f"elements for '{description}', but found {actual_count}"
        )

        context = {
            "selector": selector,
            "selector_type": selector_type,
            "expected_min": expected_min,
            "expected_max": expected_max
            if expected_max is not None
            else "unlimited",
            "actual_count": actual_count,
        }

        super().__init__(message, page_url, context)


class TitleDateAssumptionException(ScraperAssumptionException):
    """Raised when the game title carries no parseable air date.

    Clue values that are not printed on the page are computed from board
    position and a multiplier that depends on the air date, so a title
    without a date makes every computed value unknowable.

    Attributes:
        title: The title text that could not be parsed.
        errors: Field errors recorded on the page before the failure, such
            as a missing title element.
    """

    def __init__(
        self,
        title: str,
        page_url: str = "",
        errors: Sequence[str] = (),
    ) -> None:
        """Initialize the exception.

        Args:
            title: The title text that could not be parsed.
            page_url: The URL of the page, if known.
            errors: Field errors recorded before the title was parsed.
        """
        self.title = title
        self.errors = tuple(errors)
        context = {"errors": "; ".join(self.errors)} if self.errors else None
        super().__init__(f"could not parse title {title}", page_url, context)
