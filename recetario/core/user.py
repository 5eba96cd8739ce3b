"""User Entity — identity plus already-validated credential fields.

Invariants:
    - id is None (not persisted) or > 0
    - username, email and password validity belongs to their own value types
"""

from recetario.core.domain_types import UserId
from recetario.core.text_pipeline import reject
from recetario.core.user_fields import Email, Password, Username


class User:
    """An account that can author recipes."""

    def __init__(
        self,
        username: Username,
        email: Email,
        password: Password,
        id: int | None = None,
    ):
        if id is not None and (
            isinstance(id, bool) or not isinstance(id, int) or id <= 0
        ):
            reject("id", "User", "The user id must be greater than zero")

        self._id = UserId(id) if id is not None else None
        self._username = username
        self._email = email
        self._password = password

    def __repr__(self) -> str:
        return f"User(id={self._id!r}, username={self._username.value!r})"

    @property
    def id(self) -> UserId | None:
        return self._id

    @property
    def username(self) -> Username:
        return self._username

    @property
    def email(self) -> Email:
        return self._email

    @property
    def password(self) -> Password:
        return self._password
