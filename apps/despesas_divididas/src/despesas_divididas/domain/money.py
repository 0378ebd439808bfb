"""Money helpers using Decimal with two-digit precision rules."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from despesas_divididas.domain.errors import InvalidAmountError, compose_error_message

MONEY_PRECISION = Decimal("0.01")


def quantize_money(value: Decimal) -> Decimal:
    """Return value rounded to two decimal places with HALF_UP strategy.

    Raises ``InvalidAmountError`` when the rounded amount needs more digits
    than the active decimal context holds.
    """

    try:
        return value.quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise InvalidAmountError(
            message=compose_error_message(
                cause=f"Amount {value} is too large.",
                action="Send a smaller amount.",
            ),
            details={"value": str(value)},
        ) from exc


def parse_money(value: str) -> Decimal:
    """Parse and normalize input money string into Decimal."""

    try:
        parsed = Decimal(value.strip())
    except (InvalidOperation, AttributeError) as exc:
        raise InvalidAmountError(
            message=compose_error_message(
                cause=f"'{value}' is not a decimal number.",
                action="Send amounts like 10.00.",
            ),
            details={"value": str(value)},
        ) from exc
    if not parsed.is_finite():
        raise InvalidAmountError(
            message=compose_error_message(
                cause=f"'{value}' is not a finite amount.",
                action="Send amounts like 10.00.",
            ),
            details={"value": value},
        )
    return quantize_money(parsed)


def format_money(value: Decimal) -> str:
    """Render money as string with exactly two decimal places."""

    return f"{quantize_money(value):.2f}"
