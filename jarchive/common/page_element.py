"""PageElement protocol for read-only document tree access.

Extractors depend only on this interface: find descendants by XPath or CSS,
read text and attributes, and find links. Any HTML parsing library can
back it; LxmlPageElement is the implementation shipped with the package.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Link:
    """Represents an HTML <a> element with its resolved URL and text.

    Link is a pure value object.

    Attributes:
        url: The href attribute, resolved against the page URL when one is
            known. Empty when the element has no href.
        text: Visible text content of the link.
        selector: The selector that found this link.
    """

    url: str
    text: str
    selector: str


class PageElement(Protocol):
    """Protocol for driver-agnostic data extraction from HTML elements.

    All query methods support count validation and raise
    HTMLStructuralAssumptionException if the actual count doesn't match
    expectations. Pass ``min_count=0`` when absence is acceptable.
    """

    def query_xpath(
        self,
        selector: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[PageElement]:
        """Query elements by XPath selector.

        Args:
            selector: XPath expression to execute.
            description: Human-readable description of what's being selected.
            min_count: Minimum number of elements expected (default: 1).
            max_count: Maximum number of elements expected (None = unlimited).

        Returns:
            List of matching PageElement instances.

        Raises:
            HTMLStructuralAssumptionException: If count doesn't match expectations.
        """
        ...

    def query_css(
        self,
        selector: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[PageElement]:
        """Query elements by CSS selector.

        Args:
            selector: CSS selector expression.
            description: Human-readable description of what's being selected.
            min_count: Minimum number of elements expected (default: 1).
            max_count: Maximum number of elements expected (None = unlimited).

        Returns:
            List of matching PageElement instances in document order.

        Raises:
            HTMLStructuralAssumptionException: If count doesn't match expectations.
        """
        ...

    def first_css(self, selector: str, description: str) -> PageElement | None:
        """Return the first descendant matching a CSS selector, if any."""
        ...

    def text_content(self) -> str:
        """Extract the visible text content of the element and its descendants."""
        ...

    def get_attribute(self, name: str) -> str | None:
        """Extract an attribute value, or None if it doesn't exist."""
        ...

    def find_links(
        self,
        selector: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[Link]:
        """Find links matching a selector.

        Args:
            selector: XPath or CSS selector to find <a> elements.
            description: Human-readable description of the links.
            min_count: Minimum number of links expected (default: 1).
            max_count: Maximum number of links expected (None = unlimited).

        Returns:
            List of Link value objects with resolved URLs and text, one per
            matched element. An element without an href gives an empty url.

        Raises:
            HTMLStructuralAssumptionException: If count doesn't match expectations.
        """
        ...


def text_of(element: PageElement | None) -> str:
    """Text content of an optional element, empty when it is absent."""
    return element.text_content() if element is not None else ""
