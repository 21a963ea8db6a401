"""Rendering of parse replies for display and download."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any

from jarchive.models import Game

FILE_NAME_REGEX = re.compile(r"[^a-z0-9]", re.IGNORECASE)
FILE_SUFFIX = ".jep.json"
UNKNOWN_ERROR = "unknown error"


def render_game(game: Game | dict[str, Any]) -> str:
    """Serialize a game as tab-indented JSON."""
    data = game.to_dict() if isinstance(game, Game) else game
    return json.dumps(data, indent="\t", ensure_ascii=False)


def download_filename(title: str) -> str:
    """File name for a downloaded game.

    Every character other than an ASCII letter or digit becomes ``_`` and
    the result is lower-cased.

    Example::

        >>> download_filename("Show #3966 - Monday, November 26, 2001")
        'show__3966___monday__november_26__2001.jep.json'
    """
    return FILE_NAME_REGEX.sub("_", title).lower() + FILE_SUFFIX


@dataclass(frozen=True)
class Presentation:
    """What to show for a parse reply.

    Either ``banner`` is set (nothing usable to show) or ``body`` and
    ``filename`` are. ``warnings`` carries the error report of a game that
    was extracted with placeholders.
    """

    banner: str | None = None
    body: str | None = None
    filename: str | None = None
    warnings: str | None = None

    @property
    def is_error(self) -> bool:
        return self.banner is not None


def present(reply: dict[str, Any]) -> Presentation:
    """Decide how to display a parse reply."""
    error = reply.get("error")
    game = reply.get("game")
    if not game:
        return Presentation(banner=error or UNKNOWN_ERROR)

    return Presentation(
        body=render_game(game),
        filename=download_filename(game["title"]),
        warnings=error or None,
    )
