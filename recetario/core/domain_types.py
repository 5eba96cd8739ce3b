"""Domain Types — identity types, enums and bounds shared across the core.

Invariants:
    - RecipeId, UserId, AuthorId, CuisineTypeId wrap positive ints; never use bare int in signatures
    - Difficulty is a closed set, no raw string matching
    - Length bounds are counted in Unicode code points on the final normalized value

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (ADR: pydantic schemas at the boundary)
    - Bounds are constants, not settings: they are part of the stored data contract
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RecipeId = NewType("RecipeId", int)
UserId = NewType("UserId", int)
AuthorId = NewType("AuthorId", int)
CuisineTypeId = NewType("CuisineTypeId", int)


# ─── Enums ───────────────────────────────────────────────────────

class Difficulty(str, Enum):
    """Recipe difficulty — maps to DB `difficulty` column."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


# ─── Bounds ──────────────────────────────────────────────────────

TITLE_MAX_LENGTH = 255
INGREDIENTS_MAX_LENGTH = 3000
EMAIL_MAX_LENGTH = 255
USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50

PREPARATION_MIN_MINUTES = 15
PREPARATION_MAX_MINUTES = 300


# ─── Placeholder Denylists ───────────────────────────────────────

TITLE_PLACEHOLDERS: frozenset[str] = frozenset({"sin titulo"})

INGREDIENT_PLACEHOLDERS: frozenset[str] = frozenset({
    "sin ingredientes", "n/a", "ninguno", "-", "none", "na", "null",
})
