"""User Schemas — registration request and public user representation.

Invariants:
    - The password hash is accepted on the way in and never serialized on the way out
    - UserCreate.to_user() returns a valid User or raises InvalidInputError
"""

from pydantic import BaseModel, Field

from recetario.core.user import User
from recetario.core.user_fields import Email, Password, Username


class UserCreate(BaseModel):
    """User registration — the auth shell hashes the password before building this."""
    username: str
    email: str
    password_hash: str = Field(min_length=1)

    def to_user(self) -> User:
        return User(
            username=Username(self.username),
            email=Email(self.email),
            password=Password(self.password_hash),
        )


class UserResponse(BaseModel):
    """User response — public-facing user data."""
    id: int | None
    username: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username.value,
            email=user.email.value,
        )
