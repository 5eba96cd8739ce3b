"""Root conftest — shared test configuration and fixtures."""

import pytest

from recetario.config import get_settings
from recetario.core.domain_types import Difficulty
from recetario.core.recipe import Recipe
from recetario.core.recipe_fields import IngredientList, PreparationTime, Title


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep RECETARIO_* from the developer's shell out of tests."""
    for key in ("RECETARIO_LOG_LEVEL", "RECETARIO_LOG_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def recipe() -> Recipe:
    return Recipe(
        author_id=1,
        title=Title("Tortilla de patatas"),
        cuisine_type_id=2,
        ingredients=IngredientList("patatas\nhuevos\naceite\nsal"),
        preparation_time=PreparationTime(45),
        difficulty=Difficulty.MEDIUM,
    )
