"""Recipe Entity — assembles validated fields and guards identity invariants.

Invariants:
    - author_id, cuisine_type_id > 0; id is None (not persisted) or > 0
    - created_at defaults to now (UTC); an explicit future timestamp is rejected at construction only
    - No setters: fields change through named domain operations
    - change_* on a value type is a no-op when the new value is equal BY VALUE (==), never by identity
    - activate()/deactivate() are idempotent and valid from either state

Design Decisions:
    - Plain class with read-only properties over a dataclass: entity identity is the id,
      not the field values, so dataclass __eq__ would be wrong
    - Field validity is the value types' job; the entity only checks what it owns (ids, timestamp)
"""

import logging
from datetime import datetime, timezone

from recetario.core.domain_types import (
    AuthorId,
    CuisineTypeId,
    Difficulty,
    RecipeId,
)
from recetario.core.recipe_fields import IngredientList, PreparationTime, Title
from recetario.core.text_pipeline import reject

logger = logging.getLogger(__name__)


def _check_positive_id(value: int, field: str, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        reject(field, "Recipe", f"{label} must be greater than zero")


class Recipe:
    """A recipe authored by a user. Owns its field value types exclusively."""

    def __init__(
        self,
        author_id: int,
        title: Title,
        cuisine_type_id: int,
        ingredients: IngredientList,
        preparation_time: PreparationTime,
        difficulty: Difficulty,
        created_at: datetime | None = None,
        id: int | None = None,
        active: bool = True,
    ):
        _check_positive_id(author_id, "author_id", "The author id")
        _check_positive_id(cuisine_type_id, "cuisine_type_id", "The cuisine type id")
        if id is not None:
            _check_positive_id(id, "id", "The recipe id")
        # naive timestamps compare against naive local now, aware ones in their own zone
        if created_at is not None and created_at > datetime.now(created_at.tzinfo):
            reject("created_at", "Recipe", "The creation date cannot be in the future")

        self._id = RecipeId(id) if id is not None else None
        self._author_id = AuthorId(author_id)
        self._title = title
        self._cuisine_type_id = CuisineTypeId(cuisine_type_id)
        self._ingredients = ingredients
        self._preparation_time = preparation_time
        self._difficulty = difficulty
        self._active = bool(active)
        self._created_at = (
            created_at if created_at is not None else datetime.now(timezone.utc)
        )

    def __repr__(self) -> str:
        return f"Recipe(id={self._id!r}, title={self._title.value!r})"

    # --- Accessors -----------------------------------------------------------

    @property
    def id(self) -> RecipeId | None:
        return self._id

    @property
    def author_id(self) -> AuthorId:
        return self._author_id

    @property
    def title(self) -> Title:
        return self._title

    @property
    def cuisine_type_id(self) -> CuisineTypeId:
        return self._cuisine_type_id

    @property
    def ingredients(self) -> IngredientList:
        return self._ingredients

    @property
    def preparation_time(self) -> PreparationTime:
        return self._preparation_time

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def is_active(self) -> bool:
        return self._active

    # --- Domain operations ---------------------------------------------------

    def change_title(self, title: Title) -> None:
        if self._title == title:
            return
        self._title = title
        self._log_change("title")

    def change_ingredients(self, ingredients: IngredientList) -> None:
        if self._ingredients == ingredients:
            return
        self._ingredients = ingredients
        self._log_change("ingredients")

    def change_preparation_time(self, preparation_time: PreparationTime) -> None:
        if self._preparation_time == preparation_time:
            return
        self._preparation_time = preparation_time
        self._log_change("preparation_time")

    def change_difficulty(self, difficulty: Difficulty) -> None:
        self._difficulty = difficulty

    def change_cuisine_type(self, cuisine_type_id: int) -> None:
        """Re-point the recipe at another cuisine type. Positivity is re-checked."""
        _check_positive_id(cuisine_type_id, "cuisine_type_id", "The cuisine type id")
        self._cuisine_type_id = CuisineTypeId(cuisine_type_id)

    def activate(self) -> None:
        self._active = True

    def deactivate(self) -> None:
        self._active = False

    def _log_change(self, field: str) -> None:
        logger.debug(
            f"Recipe {field} changed",
            extra={"recipe_id": self._id, "field": field},
        )
