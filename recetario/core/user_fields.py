"""User Field Value Types — Email, Username, Password.

Invariants:
    - Email is stored exactly as given (after trim): uppercase is REJECTED, never folded
    - Email length (255) is checked before grammar so an overlong address reports its own reason
    - Email grammar is checked by email-validator without DNS lookups (core does no IO)
    - Username is a single normalized line of 3–50 chars, no markup, no control chars
    - Password wraps an already-hashed credential and never renders it in str()/repr()

Design Decisions:
    - email-validator over a hand-written regex: it is the library behind pydantic's
      EmailStr, so the grammar matches what pydantic-based shells already accept
"""

from dataclasses import dataclass, field

from email_validator import EmailNotValidError, validate_email

from recetario.core.domain_types import (
    EMAIL_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
)
from recetario.core.guard_content import is_valid_encoding
from recetario.core.text_pipeline import clean_text, reject


@dataclass(frozen=True)
class Email:
    """Lowercase, syntactically valid email address."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            reject("email", "Email", "The email must be text")
        if not is_valid_encoding(self.value):
            reject("email", "Email", "The email must be valid UTF-8")

        email = self.value.strip()
        if email == "":
            reject("email", "Email", "The email cannot be empty")
        if email.lower() != email:
            reject("email", "Email", "The email must be lowercase")
        if len(email) > EMAIL_MAX_LENGTH:
            reject(
                "email", "Email",
                f"The email cannot be longer than {EMAIL_MAX_LENGTH} characters",
            )
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError as exc:
            reject("email", "Email", "The email does not have a valid format", exc)

        object.__setattr__(self, "value", email)

    @property
    def domain(self) -> str:
        return self.value.rpartition("@")[2]

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Username:
    """Public display name."""

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", clean_text(
            self.value,
            field="username",
            value_type="Username",
            label="The username",
            min_length=USERNAME_MIN_LENGTH,
            max_length=USERNAME_MAX_LENGTH,
            single_line=True,
        ))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Password:
    """Opaque hashed credential. Hashing and verification belong to the auth shell."""

    value: str = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or self.value == "":
            reject("password", "Password", "The password cannot be empty")

    def __str__(self) -> str:
        return "********"
