"""Domain exceptions used across API and services."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any


def compose_error_message(*, cause: str, action: str) -> str:
    """Build a user-facing error message with cause and corrective action."""

    return f"Cause: {cause} Action: {action}"


@dataclass(slots=True)
class DomainError(Exception):
    """Base exception for predictable domain failures."""

    code: str
    message: str
    status_code: int
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


class InvalidRequestError(DomainError):
    """Raised when user sends semantically invalid input."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="INVALID_REQUEST",
            message=message
            or compose_error_message(
                cause="Request data violates business rules.",
                action="Adjust the input fields and try again.",
            ),
            status_code=HTTPStatus.BAD_REQUEST,
            details=details or {},
        )


class InvalidLocaleError(DomainError):
    """Raised when a locale tag cannot be resolved to locale data."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="INVALID_LOCALE",
            message=message
            or compose_error_message(
                cause="The locale tag is not recognized.",
                action="Use a locale identifier such as en_US or de-DE.",
            ),
            status_code=HTTPStatus.BAD_REQUEST,
            details=details or {},
        )


class ShoppingListNotFoundError(DomainError):
    """Raised when a shopping list id does not resolve."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="SHOPPING_LIST_NOT_FOUND",
            message=message
            or compose_error_message(
                cause="Shopping list was not found.",
                action="Check the list identifier and retry.",
            ),
            status_code=HTTPStatus.NOT_FOUND,
            details=details or {},
        )


class ShoppingItemNotFoundError(DomainError):
    """Raised when a shopping item id does not resolve."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="SHOPPING_ITEM_NOT_FOUND",
            message=message
            or compose_error_message(
                cause="Shopping item was not found.",
                action="Check the item identifier and retry.",
            ),
            status_code=HTTPStatus.NOT_FOUND,
            details=details or {},
        )


class EmptyItemNameError(DomainError):
    """Raised when an item name is blank after trimming."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="ITEM_NAME_EMPTY",
            message=message
            or compose_error_message(
                cause="Item name cannot be empty.",
                action="Provide a name for the item.",
            ),
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            details=details or {},
        )


class NegativePriceError(DomainError):
    """Raised when an item price per unit is below zero."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="ITEM_PRICE_NEGATIVE",
            message=message
            or compose_error_message(
                cause="Price cannot be negative.",
                action="Provide a price per unit of zero or more.",
            ),
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            details=details or {},
        )
