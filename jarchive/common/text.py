"""Text normalization for responses and category notes."""

import re

# Any markup tag, e.g. <em class="correct_response">
HTML_TAG_REGEX = re.compile(r"<[^>]*>")
# A backslash-escaped apostrophe, as left behind by the archive's inline JS
ESCAPED_QUOTE_REGEX = re.compile(r"\\'")
# (Speaker: <note>) wrapped around a category comment
SPEAKER_REGEX = re.compile(r"\((\w+): (.*)\)", re.DOTALL)


def normalize_response(text: str) -> str:
    """Strip markup tags and unescape backslash-escaped apostrophes.

    Case and whitespace are left untouched.

    Args:
        text: Raw correct-response (or clue) text.

    Returns:
        The text with every ``<...>`` tag removed and every ``\\'`` turned
        into ``'``.

    Example::

        >>> normalize_response("<em>Caf\\\\'e</em>")
        "Caf'e"
    """
    without_tags = HTML_TAG_REGEX.sub("", text)
    return ESCAPED_QUOTE_REGEX.sub("'", without_tags)


def strip_speaker(note: str) -> str:
    """Rewrite a ``(Speaker: rest)`` annotation to just ``rest``.

    Notes that do not carry a speaker annotation are returned verbatim.
    """
    return SPEAKER_REGEX.sub(r"\2", note, count=1)
