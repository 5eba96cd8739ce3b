"""Recipe Field Value Types — Title, IngredientList, PreparationTime.

Invariants:
    - Immutable (frozen dataclasses); equality and hash are by normalized content
    - Construction either fully succeeds or raises InvalidInputError; no invalid instance exists
    - Title: 1–255 chars, no markup, no control chars, not "sin titulo"
    - IngredientList: 1–3000 chars, multi-line, no markup, no control chars, not a placeholder
    - PreparationTime: 15–300 minutes, checked exactly once whatever the entry path

Design Decisions:
    - __post_init__ replaces the raw value with the normalized one (object.__setattr__ on a
      frozen dataclass): callers construct with raw input and read back the stored form
    - PreparationTime.from_format funnels into the int constructor (ADR: single range check)
"""

import re
from dataclasses import dataclass

from recetario.core.domain_types import (
    INGREDIENT_PLACEHOLDERS,
    INGREDIENTS_MAX_LENGTH,
    PREPARATION_MAX_MINUTES,
    PREPARATION_MIN_MINUTES,
    TITLE_MAX_LENGTH,
    TITLE_PLACEHOLDERS,
)
from recetario.core.text_pipeline import clean_text, reject

_HOURS_MINUTES = re.compile(r"([0-9]+):([0-5][0-9])")


@dataclass(frozen=True)
class Title:
    """Recipe title — single normalized string."""

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", clean_text(
            self.value,
            field="title",
            value_type="Title",
            label="The title",
            max_length=TITLE_MAX_LENGTH,
            placeholders=TITLE_PLACEHOLDERS,
        ))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class IngredientList:
    """Ingredients — one per line; line breaks are preserved, blank lines are not."""

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", clean_text(
            self.value,
            field="ingredients",
            value_type="IngredientList",
            label="The ingredients",
            max_length=INGREDIENTS_MAX_LENGTH,
            placeholders=INGREDIENT_PLACEHOLDERS,
        ))

    @property
    def lines(self) -> list[str]:
        return self.value.split("\n")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class PreparationTime:
    """Preparation time in whole minutes."""

    minutes: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True minutes is a caller bug, not 1 minute
        if isinstance(self.minutes, bool) or not isinstance(self.minutes, int):
            reject(
                "preparation_time", "PreparationTime",
                "The preparation time must be a whole number of minutes",
            )
        if not PREPARATION_MIN_MINUTES <= self.minutes <= PREPARATION_MAX_MINUTES:
            reject(
                "preparation_time", "PreparationTime",
                f"The preparation time must be between {PREPARATION_MIN_MINUTES} "
                f"and {PREPARATION_MAX_MINUTES} minutes",
            )

    @classmethod
    def from_format(cls, text: str) -> "PreparationTime":
        """Build from "H:MM" (form input). Minutes must be 00–59; hours are unbounded."""
        match = _HOURS_MINUTES.fullmatch(text.strip()) if isinstance(text, str) else None
        if match is None:
            reject(
                "preparation_time", "PreparationTime",
                "The format must be H:MM (example: 1:30)",
            )
        hours, minutes = int(match.group(1)), int(match.group(2))
        return cls(hours * 60 + minutes)

    @property
    def hours(self) -> float:
        return self.minutes / 60

    def format(self) -> str:
        """Render as "H:MM"."""
        hours, minutes = divmod(self.minutes, 60)
        return f"{hours}:{minutes:02d}"

    def __str__(self) -> str:
        return self.format()
