"""Text Field Pipeline — the fixed validate → normalize → guard sequence for free text.

Invariants:
    - Encoding is checked on the RAW input before any transformation
    - Length is measured on the FINAL normalized value, the one that gets stored
    - Fail closed: every violation raises InvalidInputError, nothing is repaired silently
    - Order is fixed: encoding, normalize, empty, markup, control chars, length, placeholder

Design Decisions:
    - Control chars are checked on the raw text: normalization would turn VT, FF and
      U+001C–U+001F into spaces and hide them (ADR: fail closed)
    - One shared pipeline for every text field: field types only pick bounds and denylists
"""

import logging
from collections.abc import Collection
from typing import NoReturn

from recetario.core.detect_placeholder import is_placeholder
from recetario.core.errors import InvalidInputError
from recetario.core.guard_content import (
    contains_control_chars,
    contains_markup,
    is_valid_encoding,
)
from recetario.core.normalize_text import normalize_text

logger = logging.getLogger(__name__)


def reject(
    field: str, value_type: str, message: str, cause: Exception | None = None,
) -> NoReturn:
    """Log and raise the InvalidInputError for one violated rule."""
    logger.debug(
        f"{value_type} rejected: {message}",
        extra={"field": field, "error_code": "INVALID_INPUT"},
    )
    error = InvalidInputError(message, field=field, value_type=value_type)
    if cause is not None:
        raise error from cause
    raise error


def clean_text(
    raw: str,
    *,
    field: str,
    value_type: str,
    label: str,
    max_length: int,
    placeholders: Collection[str] = frozenset(),
    min_length: int = 1,
    single_line: bool = False,
) -> str:
    """Run raw text through the full pipeline and return the value to store.

    label is the human name used in messages ("The title", "The ingredients").
    """
    if not isinstance(raw, str):
        reject(field, value_type, f"{label} must be text")
    if not is_valid_encoding(raw):
        reject(field, value_type, f"{label} must be valid UTF-8")

    normalized = normalize_text(raw)

    if normalized == "":
        reject(field, value_type, f"{label} cannot be empty")
    if single_line and "\n" in normalized:
        reject(field, value_type, f"{label} cannot contain line breaks")
    if contains_markup(normalized):
        reject(field, value_type, f"{label} cannot contain HTML tags")
    if contains_control_chars(raw):
        reject(field, value_type, f"{label} cannot contain control characters")
    if len(normalized) > max_length:
        reject(
            field, value_type,
            f"{label} cannot be longer than {max_length} characters",
        )
    if len(normalized) < min_length:
        reject(
            field, value_type,
            f"{label} must be at least {min_length} characters long",
        )
    if is_placeholder(normalized, placeholders):
        reject(field, value_type, f"{label} cannot be a placeholder value")

    return normalized
