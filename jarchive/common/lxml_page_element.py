"""LxmlPageElement implementation wrapping CheckedHtmlElement.

This module provides the implementation of the PageElement protocol used by
the extractors. It wraps CheckedHtmlElement and delegates to it.
"""

from __future__ import annotations

from urllib.parse import urljoin

from lxml import html

from jarchive.common.checked_html import CheckedHtmlElement
from jarchive.common.page_element import Link


class LxmlPageElement:
    """Implementation of PageElement protocol wrapping CheckedHtmlElement.

    Attributes:
        _element: The underlying CheckedHtmlElement.
        _url: The base URL for resolving relative URLs.
    """

    def __init__(self, element: CheckedHtmlElement, url: str = ""):
        """Initialize LxmlPageElement.

        Args:
            element: The CheckedHtmlElement to wrap.
            url: Base URL for resolving relative URLs.
        """
        self._element = element
        self._url = url

    @classmethod
    def from_html(cls, content: str | bytes, url: str = "") -> LxmlPageElement:
        """Parse an HTML document into a page element.

        Args:
            content: The full HTML document.
            url: The address the document was saved from. Relative link
                targets are resolved against it.

        Returns:
            LxmlPageElement wrapping the document root.
        """
        doc = html.document_fromstring(content)
        return cls(CheckedHtmlElement(doc, url), url)

    @property
    def url(self) -> str:
        """The base URL used to resolve relative links."""
        return self._url

    def query_xpath(
        self,
        selector: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[LxmlPageElement]:
        """Query elements by XPath selector.

        Args:
            selector: XPath expression to execute.
            description: Human-readable description of what's being selected.
            min_count: Minimum number of elements expected (default: 1).
            max_count: Maximum number of elements expected (None = unlimited).

        Returns:
            List of matching LxmlPageElement instances.

        Raises:
            HTMLStructuralAssumptionException: If count doesn't match expectations.
        """
        checked_elements = self._element.checked_xpath(
            selector, description, min_count, max_count
        )
        return [LxmlPageElement(elem, self._url) for elem in checked_elements]

    def query_css(
        self,
        selector: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[LxmlPageElement]:
        """Query elements by CSS selector.

        Args:
            selector: CSS selector expression.
            description: Human-readable description of what's being selected.
            min_count: Minimum number of elements expected (default: 1).
            max_count: Maximum number of elements expected (None = unlimited).

        Returns:
            List of matching LxmlPageElement instances in document order.

        Raises:
            HTMLStructuralAssumptionException: If count doesn't match expectations.
        """
        checked_elements = self._element.checked_css(
            selector, description, min_count, max_count
        )
        return [LxmlPageElement(elem, self._url) for elem in checked_elements]

    def first_css(
        self, selector: str, description: str
    ) -> LxmlPageElement | None:
        """Return the first descendant matching a CSS selector.

        Args:
            selector: CSS selector expression.
            description: Human-readable description of what's being selected.

        Returns:
            The first match in document order, or None when nothing matches.
        """
        matches = self.query_css(selector, description, min_count=0)
        return matches[0] if matches else None

    def text_content(self) -> str:
        """Extract the visible text content.

        Returns:
            Visible text content of the element and its descendants.
        """
        return self._element.text_content()

    def get_attribute(self, name: str) -> str | None:
        """Extract an attribute value.

        Args:
            name: Name of the attribute.

        Returns:
            Value of the attribute, or None if it doesn't exist.
        """
        return self._element.get(name)

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
            matched element. An element without an href gives a Link with
            an empty url, so callers can report it.

        Raises:
            HTMLStructuralAssumptionException: If count doesn't match expectations.
        """
        # XPath if it looks like XPath, otherwise CSS
        if selector.startswith("/") or selector.startswith("."):
            link_elements = self.query_xpath(
                selector, description, min_count, max_count
            )
        else:
            link_elements = self.query_css(
                selector, description, min_count, max_count
            )

        links: list[Link] = []
        for i, elem in enumerate(link_elements):
            href = (elem.get_attribute("href") or "").strip()
            if href and self._url:
                url = urljoin(self._url, href)
            else:
                url = href
            text = elem.text_content().strip()
            links.append(
                Link(url=url, text=text, selector=f"({selector})[{i + 1}]")
            )

        return links

