"""Domain value objects for money amounts."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from despesas_divididas.domain.errors import InvalidAmountError, compose_error_message
from despesas_divididas.domain.money import format_money, parse_money, quantize_money

ParticipantId = int
GroupId = int


@dataclass(frozen=True, slots=True, order=True)
class Money:
    """Represents an amount in integer cents.

    Arithmetic never leaves the cent grid, so sums of shares reconcile
    exactly with the totals they were derived from.
    """

    cents: int

    def __post_init__(self) -> None:
        if not isinstance(self.cents, int) or isinstance(self.cents, bool):
            raise TypeError("Money cents must be an integer")

    @classmethod
    def from_decimal(cls, amount: Decimal) -> Money:
        """Create a money value from a decimal amount, rounding HALF_UP."""
        quantized = quantize_money(amount)
        return cls(cents=int(quantized * 100))

    @classmethod
    def from_decimal_string(cls, value: str) -> Money:
        """Parse a decimal string such as ``"10.50"``."""
        return cls.from_decimal(parse_money(value))

    @classmethod
    def non_negative(cls, value: str | Decimal | Money) -> Money:
        """Build a money value and reject negative amounts."""
        if isinstance(value, Money):
            money = value
        elif isinstance(value, Decimal):
            money = cls.from_decimal(value)
        else:
            money = cls.from_decimal_string(value)
        if money.is_negative():
            raise InvalidAmountError(
                message=compose_error_message(
                    cause=f"Amount {money} is negative.",
                    action="Provide an amount greater than or equal to zero.",
                ),
                details={"amount": money.format()},
            )
        return money

    @classmethod
    def zero(cls) -> Money:
        """Return a zero amount."""
        return cls(cents=0)

    def __add__(self, other: Money) -> Money:
        return Money(cents=self.cents + other.cents)

    def __sub__(self, other: Money) -> Money:
        return Money(cents=self.cents - other.cents)

    def __neg__(self) -> Money:
        return Money(cents=-self.cents)

    def multiply_by_int(self, factor: int) -> Money:
        """Return the amount multiplied by an integer factor."""
        return Money(cents=self.cents * factor)

    def divide_into_shares(self, count: int) -> tuple[Money, Money]:
        """Split into ``count`` equal shares rounded down to the cent.

        Returns ``(share, remainder)`` where ``share * count + remainder``
        equals the divided amount and ``0 <= remainder < count`` cents.
        """
        if count <= 0:
            raise InvalidAmountError(
                message=compose_error_message(
                    cause="Amount cannot be divided into zero or fewer shares.",
                    action="Provide at least one participant.",
                ),
                details={"shares": count},
            )
        share_cents, remainder_cents = divmod(self.cents, count)
        return Money(cents=share_cents), Money(cents=remainder_cents)

    def absolute(self) -> Money:
        """Return the absolute money amount."""
        return Money(cents=abs(self.cents))

    def is_zero(self) -> bool:
        return self.cents == 0

    def is_negative(self) -> bool:
        return self.cents < 0

    def to_decimal(self) -> Decimal:
        return Decimal(self.cents) / Decimal(100)

    def format(self) -> str:
        """Format amount as a plain two-digit string."""
        return format_money(self.to_decimal())

    def __str__(self) -> str:
        return self.format()
