"""Money helpers using Decimal with two-digit HALF_UP precision."""

from contextlib import AbstractContextManager
from decimal import (
    ROUND_HALF_UP,
    Context,
    Decimal,
    InvalidOperation,
    getcontext,
    localcontext,
)

from checkout_hero.domain.errors import InvalidRequestError, compose_error_message

MONEY_PRECISION = Decimal("0.01")
WHOLE_PRECISION = Decimal("1")
MONEY_ROUNDING = ROUND_HALF_UP


def money_context(value: Decimal) -> AbstractContextManager[Context]:
    """Return a decimal context wide enough to keep every digit of ``value``.

    The default 28-digit precision makes ``quantize`` fail for amounts with
    27 or more integer digits once two fraction digits are added.
    """

    precision = getcontext().prec
    if value.is_finite():
        precision = max(precision, value.adjusted() + 3)
    return localcontext(prec=precision)


def quantize_money(value: Decimal) -> Decimal:
    """Return value rounded to two decimal places with HALF_UP strategy."""

    with money_context(value):
        return value.quantize(MONEY_PRECISION, rounding=MONEY_ROUNDING)


def quantize_whole(value: Decimal) -> Decimal:
    """Return value rounded to an integer with HALF_UP strategy."""

    with money_context(value):
        return value.quantize(WHOLE_PRECISION, rounding=MONEY_ROUNDING)


def parse_money(value: str) -> Decimal:
    """Parse a plain decimal string (``"12.50"``) into a quantized Decimal."""

    try:
        amount = Decimal(value.strip())
    except InvalidOperation as exc:
        raise InvalidRequestError(
            message=compose_error_message(
                cause=f"'{value}' is not a decimal number.",
                action="Send the amount as a plain decimal such as 12.50.",
            )
        ) from exc
    if not amount.is_finite():
        raise InvalidRequestError(
            message=compose_error_message(
                cause="Amount must be a finite number.",
                action="Send the amount as a plain decimal such as 12.50.",
            )
        )
    return quantize_money(amount)


def format_money(value: Decimal) -> str:
    """Render money as plain string with exactly two decimal places."""

    return f"{quantize_money(value):.2f}"
