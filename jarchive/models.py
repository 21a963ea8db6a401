"""Pydantic data models for extracted games.

The serialized form uses the camelCase field names consumed by the game
player (``categoryNames``, ``longForm``, ``imageSrc``) and omits optional
fields that are unset.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

#: Used when a field has an error.
ERROR_PLACEHOLDER = "***ERROR***"
#: Used when a field was not revealed in the game playthrough.
UNREVEALED_PLACEHOLDER = "***Unrevealed***"
#: Used when a field was not recorded on the archive.
MISSING_PLACEHOLDER = "***Missing***"

GAME_AUTHOR = "J! Archive"
GAME_COPYRIGHT = "Jeopardy!"


class ExtractedData(BaseModel):
    """Base class for extracted records.

    Records are immutable once built and serialize with camelCase aliases.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain Python data with wire field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = None) -> str:
        """Serialize to JSON with wire field names."""
        return self.model_dump_json(
            by_alias=True, exclude_none=True, indent=indent
        )

    @classmethod
    def from_json(cls, data: str | bytes):
        """Parse a record previously produced by ``to_json``."""
        return cls.model_validate_json(data)


class Clue(ExtractedData):
    """A single clue and its correct response."""

    clue: str = Field(..., description="Clue text or a placeholder")
    answer: str = Field(..., description="Correct response or a placeholder")
    value: int = Field(..., ge=0, description="Printed or expected value")
    wagerable: bool | None = Field(
        None,
        description="Players wager on this clue instead of playing its value",
    )
    long_form: bool | None = Field(
        None,
        description="All players write down a response over a longer period",
    )
    image_src: str | None = Field(
        None, description="URL of an image to display with the clue"
    )

    def is_empty(self) -> bool:
        """Whether clue and answer are both missing or unrevealed."""
        return is_blank(self.clue) and is_blank(self.answer)


class Category(ExtractedData):
    """A column of clues sharing a topic."""

    name: str
    note: str = ""
    clues: tuple[Clue, ...] = ()


class Board(ExtractedData):
    """One round of play."""

    category_names: tuple[str, ...] = Field(
        ..., description="Category names in reading order"
    )
    categories: tuple[Category, ...]

    @classmethod
    def from_categories(cls, categories: list[Category]) -> Board:
        """Build a board whose names line up with its categories."""
        return cls(
            category_names=tuple(category.name for category in categories),
            categories=tuple(categories),
        )


class Game(ExtractedData):
    """A complete game: standard rounds first, final round last."""

    title: str
    author: str = GAME_AUTHOR
    copyright: str = GAME_COPYRIGHT
    note: str = ""
    boards: tuple[Board, ...] = ()


class ExtractionResult(BaseModel):
    """Outcome of extracting one page.

    ``error`` being set does not make ``game`` unusable: the game is a
    best-effort result with placeholders wherever a field was not found.
    ``game`` is None only when extraction failed outright.
    """

    model_config = ConfigDict(frozen=True)

    game: Game | None = None
    error: str | None = None

    def to_message(self) -> dict[str, Any]:
        """Serialize as the reply to a parse request."""
        message: dict[str, Any] = {
            "game": self.game.to_dict() if self.game is not None else None
        }
        if self.error is not None:
            message["error"] = self.error
        return message


def is_blank(text: str) -> bool:
    """Whether a field holds the missing or unrevealed placeholder."""
    return text in (MISSING_PLACEHOLDER, UNREVEALED_PLACEHOLDER)
