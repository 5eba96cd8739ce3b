"""Boundary Protocols — persistence contracts between core and shell.

Invariants:
    - Core NEVER imports from the persistence shell; dependency arrows point inward only
    - Repositories receive and return fully-built entities, never raw dicts
    - save() returns the entity's id, assigning one when the entity was not yet persisted

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO, but nothing in core awaits them:
      the shell orchestrates the calls around the pure validation
"""

from typing import Protocol

from recetario.core.domain_types import AuthorId, RecipeId, UserId
from recetario.core.recipe import Recipe
from recetario.core.user import User
from recetario.core.user_fields import Email


class RecipeRepository(Protocol):
    """Contract for recipe persistence — implemented by shell."""
    async def save(self, recipe: Recipe) -> RecipeId: ...
    async def get_by_id(self, recipe_id: RecipeId) -> Recipe | None: ...
    async def list_by_author(
        self, author_id: AuthorId, *, only_active: bool = True,
    ) -> list[Recipe]: ...
    async def delete(self, recipe_id: RecipeId) -> None: ...


class UserRepository(Protocol):
    """Contract for user persistence — implemented by shell."""
    async def save(self, user: User) -> UserId: ...
    async def get_by_id(self, user_id: UserId) -> User | None: ...
    async def get_by_email(self, email: Email) -> User | None: ...
