"""Ordered collection of field-level extraction errors."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)


class Diagnostics:
    """Collects recoverable error messages in traversal order.

    Extractors record a message here whenever they substitute a placeholder
    for a missing or malformed field, then keep going. Child extractors
    hand their Diagnostics to the parent, which merges them with
    ``extend`` so the final report follows document traversal order.

    Example::

        errors = Diagnostics()
        errors.add("could not find id game_title on page")
        errors.extend(board_errors)
        result_error = errors.report()  # None when nothing was recorded
    """

    def __init__(self, messages: Iterable[str] = ()) -> None:
        self._messages: list[str] = list(messages)

    def add(self, message: str) -> None:
        """Record one error message."""
        logger.debug("Field error: %s", message)
        self._messages.append(message)

    def extend(self, other: Iterable[str]) -> None:
        """Append every message of another collection, keeping its order."""
        self._messages.extend(other)

    def report(self) -> str | None:
        """Join all messages, one per line.

        Returns:
            The newline-joined report, or None if no error was recorded.
        """
        if not self._messages:
            return None
        return "\n".join(self._messages)

    @property
    def messages(self) -> tuple[str, ...]:
        return tuple(self._messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __bool__(self) -> bool:
        return bool(self._messages)

    def __repr__(self) -> str:
        return f"Diagnostics({self._messages!r})"
