"""Storefront exception hierarchy."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

REQUIRED_FIELDS_MESSAGE = "Заполните все обязательные поля"


class StorefrontError(Exception):
    """Base class for every error raised by the storefront core."""


@dataclass
class ValidationError(StorefrontError):
    """Raised when a submitted form or value is incomplete or malformed.

    Attributes:
        field_errors: mapping of field name -> human-readable error message.
        message: top-level message shown to the user.
    """

    field_errors: Dict[str, str] = field(default_factory=dict)
    message: str = REQUIRED_FIELDS_MESSAGE

    def __str__(self) -> str:
        return self.message


class InvalidQuantityError(ValidationError):
    def __init__(self, quantity: int) -> None:
        super().__init__(
            field_errors={"quantity": f"Количество не может быть отрицательным ({quantity})"},
            message="Количество не может быть отрицательным",
        )


class NotFoundError(StorefrontError):
    def __init__(self, kind: str, identifier: object) -> None:
        super().__init__(f"{kind} {identifier!r} not found")
        self.kind = kind
        self.identifier = identifier


class PersistenceError(StorefrontError):
    """Durable storage could not be read, written or decoded."""

    def __init__(self, message: str, key: Optional[str] = None) -> None:
        super().__init__(message)
        self.key = key


class AccessDeniedError(StorefrontError):
    """The current session may not open the requested view."""

    def __init__(self, message: str = "Доступ запрещен", redirect_to: str = "/login") -> None:
        super().__init__(message)
        self.redirect_to = redirect_to
