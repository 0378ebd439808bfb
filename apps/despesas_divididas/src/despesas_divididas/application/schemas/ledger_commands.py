"""Validated commands shared by the API and the CLI script runner."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

SplitKind = Literal["equal", "exact", "percentage"]
AmountStr = Annotated[str, Field(pattern=r"^[0-9]+\.[0-9]{2}$")]
PercentageStr = Annotated[str, Field(pattern=r"^[0-9]+(\.[0-9]+)?$")]


def _require_positive_amount(value: str) -> str:
    try:
        amount_decimal = Decimal(value)
    except InvalidOperation as exc:
        raise ValueError("Amount must be a decimal number.") from exc
    if amount_decimal <= Decimal("0"):
        raise ValueError("Amount must be greater than zero.")
    return value


class SplitInput(BaseModel):
    """Exact amount owed by one participant."""

    participant_id: int
    amount: AmountStr


class PercentageInput(BaseModel):
    """Percentage of the total owed by one participant."""

    participant_id: int
    percentage: PercentageStr


class ExpenseCommand(BaseModel):
    """Expense to register, in one of the three split shapes.

    ``equal`` uses ``participants`` or, when omitted, the members of
    ``group_id``; ``exact`` uses ``splits``; ``percentage`` uses
    ``percentages``.
    """

    payer_id: int
    amount: AmountStr
    split_type: SplitKind = "equal"
    note: str = Field(default="", max_length=280)
    group_id: int | None = None
    participants: list[int] | None = Field(default=None, min_length=1)
    splits: list[SplitInput] | None = Field(default=None, min_length=1)
    percentages: list[PercentageInput] | None = Field(default=None, min_length=1)

    @field_validator("note")
    @classmethod
    def strip_note(cls, value: str) -> str:
        return value.strip()

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, value: str) -> str:
        return _require_positive_amount(value)

    @model_validator(mode="after")
    def validate_split_shape(self) -> ExpenseCommand:
        if self.split_type == "equal":
            if self.participants is None and self.group_id is None:
                raise ValueError("Equal split requires participants or group_id.")
        elif self.split_type == "exact":
            if self.splits is None:
                raise ValueError("Exact split requires splits.")
        elif self.percentages is None:
            raise ValueError("Percentage split requires percentages.")
        return self


class SettlementCommand(BaseModel):
    """Payment from ``payer_id`` to ``payee_id`` reducing the payer's debt."""

    payer_id: int
    payee_id: int
    amount: AmountStr

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, value: str) -> str:
        return _require_positive_amount(value)


class UserCommand(BaseModel):
    """User to register in the directory."""

    name: str = Field(min_length=1, max_length=120)
    email: str = Field(default="", max_length=254)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        trimmed = value.strip()
        if not trimmed:
            raise ValueError("Name cannot be blank.")
        return trimmed


class GroupCommand(BaseModel):
    """Group to register in the directory."""

    name: str = Field(min_length=1, max_length=120)
    member_ids: list[int] = Field(min_length=1)
