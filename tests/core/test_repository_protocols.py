"""Repository protocols — an in-memory shell implementation satisfies the contracts.

Invariants:
    - save() assigns an id to a not-yet-persisted recipe/user
    - list_by_author() hides inactive recipes unless asked
"""

import pytest

from recetario.core.domain_types import AuthorId, RecipeId, UserId
from recetario.core.recipe import Recipe
from recetario.core.repository_protocols import RecipeRepository, UserRepository
from recetario.core.recipe_fields import Title
from recetario.core.user import User
from recetario.core.user_fields import Email, Password, Username


class InMemoryRecipeRepository:
    def __init__(self):
        self._rows: dict[RecipeId, Recipe] = {}

    async def save(self, recipe: Recipe) -> RecipeId:
        if recipe.id is not None:
            self._rows[recipe.id] = recipe
            return recipe.id
        recipe_id = RecipeId(len(self._rows) + 1)
        self._rows[recipe_id] = Recipe(
            author_id=recipe.author_id,
            title=recipe.title,
            cuisine_type_id=recipe.cuisine_type_id,
            ingredients=recipe.ingredients,
            preparation_time=recipe.preparation_time,
            difficulty=recipe.difficulty,
            created_at=recipe.created_at,
            id=recipe_id,
            active=recipe.is_active,
        )
        return recipe_id

    async def get_by_id(self, recipe_id: RecipeId) -> Recipe | None:
        return self._rows.get(recipe_id)

    async def list_by_author(
        self, author_id: AuthorId, *, only_active: bool = True,
    ) -> list[Recipe]:
        return [
            r for r in self._rows.values()
            if r.author_id == author_id and (r.is_active or not only_active)
        ]

    async def delete(self, recipe_id: RecipeId) -> None:
        self._rows.pop(recipe_id, None)


class InMemoryUserRepository:
    def __init__(self):
        self._rows: dict[UserId, User] = {}

    async def save(self, user: User) -> UserId:
        user_id = user.id or UserId(len(self._rows) + 1)
        self._rows[user_id] = User(user.username, user.email, user.password, id=user_id)
        return user_id

    async def get_by_id(self, user_id: UserId) -> User | None:
        return self._rows.get(user_id)

    async def get_by_email(self, email: Email) -> User | None:
        return next((u for u in self._rows.values() if u.email == email), None)


@pytest.mark.asyncio
async def test_recipe_repository_round_trip(recipe):
    repo: RecipeRepository = InMemoryRecipeRepository()
    recipe_id = await repo.save(recipe)
    stored = await repo.get_by_id(recipe_id)
    assert stored.id == recipe_id
    assert stored.title == recipe.title

    stored.deactivate()
    await repo.save(stored)
    assert await repo.list_by_author(recipe.author_id) == []
    assert await repo.list_by_author(recipe.author_id, only_active=False) == [stored]

    await repo.delete(recipe_id)
    assert await repo.get_by_id(recipe_id) is None


@pytest.mark.asyncio
async def test_recipe_repository_keeps_renamed_title(recipe):
    repo: RecipeRepository = InMemoryRecipeRepository()
    recipe_id = await repo.save(recipe)
    stored = await repo.get_by_id(recipe_id)
    stored.change_title(Title("Tortilla paisana"))
    await repo.save(stored)
    assert (await repo.get_by_id(recipe_id)).title.value == "Tortilla paisana"


@pytest.mark.asyncio
async def test_user_repository_finds_by_email():
    repo: UserRepository = InMemoryUserRepository()
    user = User(Username("ana"), Email("ana@recetas.es"), Password("$2b$12$hash"))
    user_id = await repo.save(user)
    found = await repo.get_by_email(Email("ana@recetas.es"))
    assert found.id == user_id
    assert await repo.get_by_email(Email("otro@recetas.es")) is None
