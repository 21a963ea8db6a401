"""Checked HTML element wrapper for safe XPath/CSS querying.

This module provides CheckedHtmlElement, a wrapper around lxml.html.HtmlElement
that validates selector results against expected counts. Callers that treat
absence as data pass ``min_count=0``; callers with a hard structural
requirement get an HTMLStructuralAssumptionException with full context.
"""

from __future__ import annotations

from cssselect import SelectorError
from lxml.html import HtmlElement

from jarchive.common.exceptions import (
    HTMLStructuralAssumptionException,
)


class CheckedHtmlElement:
    """Wrapper around HtmlElement with validated selectors.

    This class wraps an lxml HtmlElement and provides checked_xpath() and
    checked_css() methods that validate the number of results against expected
    min/max counts. If the actual count doesn't match expectations, it raises
    HTMLStructuralAssumptionException with clear error context.
    """

    def __init__(self, element: HtmlElement, page_url: str = "") -> None:
        """Initialize the checked element wrapper.

        Args:
            element: The lxml HtmlElement to wrap.
            page_url: Optional URL for error context.
        """
        self._element = element
        self._page_url = page_url

    @property
    def element(self) -> HtmlElement:
        """The wrapped lxml element."""
        return self._element

    def _check_count(
        self,
        selector: str,
        selector_type: str,
        description: str,
        min_count: int,
        max_count: int | None,
        actual_count: int,
    ) -> None:
        if actual_count < min_count or (
            max_count is not None and actual_count > max_count
        ):
            raise HTMLStructuralAssumptionException(
                selector=selector,
                selector_type=selector_type,
                description=description,
                expected_min=min_count,
                expected_max=max_count,
                actual_count=actual_count,
                page_url=self._page_url,
            )

    def checked_xpath(
        self,
        xpath: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[CheckedHtmlElement]:
        """Execute XPath query with count validation.

        Args:
            xpath: XPath expression to execute.
            description: Human-readable description of what's being selected.
            min_count: Minimum number of elements expected (default: 1).
            max_count: Maximum number of elements expected (None = unlimited).

        Returns:
            List of matching CheckedHtmlElements. String results (text
            nodes, attributes) are not elements and are left out.

        Raises:
            HTMLStructuralAssumptionException: If count doesn't match expectations.

        Example::

            tree = CheckedHtmlElement(lxml.html.fromstring(html))
            rounds = tree.checked_xpath("//div[@id='jeopardy_round']", "round")
        """
        results = self._element.xpath(xpath)

        wrapped: list[CheckedHtmlElement] = [
            CheckedHtmlElement(r, self._page_url)
            for r in results
            if isinstance(r, HtmlElement)
        ]
        self._check_count(
            xpath, "xpath", description, min_count, max_count, len(wrapped)
        )
        return wrapped

    def checked_css(
        self,
        selector: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[CheckedHtmlElement]:
        """Execute CSS selector query with count validation.

        Args:
            selector: CSS selector expression.
            description: Human-readable description of what's being selected.
            min_count: Minimum number of elements expected (default: 1).
            max_count: Maximum number of elements expected (None = unlimited).

        Returns:
            List of matching CheckedHtmlElements, in document order.

        Raises:
            HTMLStructuralAssumptionException: If count doesn't match
                expectations, or if the selector cannot be parsed.

        Example::

            tree = CheckedHtmlElement(lxml.html.fromstring(html))
            title = tree.checked_css("#game_title", "game title", max_count=1)
            clues = tree.checked_css("td.clue", "clue cells", min_count=0)
        """
        try:
            results = self._element.cssselect(selector)
        except SelectorError as e:
            raise HTMLStructuralAssumptionException(
                selector=selector,
                selector_type="css",
                description=description,
                expected_min=min_count,
                expected_max=max_count,
                actual_count=0,
                page_url=self._page_url,
            ) from e

        self._check_count(
            selector, "css", description, min_count, max_count, len(results)
        )

        return [
            CheckedHtmlElement(result, self._page_url) for result in results
        ]

    def __getattr__(self, name: str):
        """Delegate all other attributes to the wrapped element.

        This allows CheckedHtmlElement to be used as a drop-in replacement for
        HtmlElement, while adding the checked methods.
        """
        return getattr(self._element, name)
