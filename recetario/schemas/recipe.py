"""Recipe Schemas — create/update requests and the public recipe representation.

Invariants:
    - RecipeCreate.to_recipe() returns a fully valid Recipe or raises InvalidInputError
    - RecipeUpdate.apply_to() only touches fields that were sent (None = unchanged)
    - preparation_time accepts whole minutes (int) or "H:MM" (str)
"""

from datetime import datetime

from pydantic import BaseModel, Field

from recetario.core.domain_types import Difficulty
from recetario.core.recipe import Recipe
from recetario.core.recipe_fields import IngredientList, PreparationTime, Title


def _preparation_time(value: int | str) -> PreparationTime:
    if isinstance(value, str):
        return PreparationTime.from_format(value)
    return PreparationTime(value)


class RecipeCreate(BaseModel):
    """Recipe creation — shape check here, content rules in the value types."""
    author_id: int = Field(gt=0)
    title: str
    cuisine_type_id: int = Field(gt=0)
    ingredients: str
    preparation_time: int | str
    difficulty: Difficulty
    created_at: datetime | None = None

    def to_recipe(self) -> Recipe:
        return Recipe(
            author_id=self.author_id,
            title=Title(self.title),
            cuisine_type_id=self.cuisine_type_id,
            ingredients=IngredientList(self.ingredients),
            preparation_time=_preparation_time(self.preparation_time),
            difficulty=self.difficulty,
            created_at=self.created_at,
        )


class RecipeUpdate(BaseModel):
    """Partial recipe update — every field optional."""
    title: str | None = None
    cuisine_type_id: int | None = Field(None, gt=0)
    ingredients: str | None = None
    preparation_time: int | str | None = None
    difficulty: Difficulty | None = None
    active: bool | None = None

    def apply_to(self, recipe: Recipe) -> Recipe:
        """Validate every sent field first, then apply them through domain operations.

        Nothing is applied if any field is invalid.
        """
        title = Title(self.title) if self.title is not None else None
        ingredients = (
            IngredientList(self.ingredients) if self.ingredients is not None else None
        )
        preparation_time = (
            _preparation_time(self.preparation_time)
            if self.preparation_time is not None else None
        )

        if title is not None:
            recipe.change_title(title)
        if ingredients is not None:
            recipe.change_ingredients(ingredients)
        if preparation_time is not None:
            recipe.change_preparation_time(preparation_time)
        if self.cuisine_type_id is not None:
            recipe.change_cuisine_type(self.cuisine_type_id)
        if self.difficulty is not None:
            recipe.change_difficulty(self.difficulty)
        if self.active is True:
            recipe.activate()
        elif self.active is False:
            recipe.deactivate()
        return recipe


class RecipeResponse(BaseModel):
    """Recipe response — public-facing recipe data."""
    id: int | None
    author_id: int
    title: str
    cuisine_type_id: int
    ingredients: list[str]
    preparation_time_minutes: int
    preparation_time: str
    difficulty: Difficulty
    active: bool
    created_at: datetime

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeResponse":
        return cls(
            id=recipe.id,
            author_id=recipe.author_id,
            title=recipe.title.value,
            cuisine_type_id=recipe.cuisine_type_id,
            ingredients=recipe.ingredients.lines,
            preparation_time_minutes=recipe.preparation_time.minutes,
            preparation_time=recipe.preparation_time.format(),
            difficulty=recipe.difficulty,
            active=recipe.is_active,
            created_at=recipe.created_at,
        )
