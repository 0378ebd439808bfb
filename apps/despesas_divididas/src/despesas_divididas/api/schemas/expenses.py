"""Schemas for expense and settlement endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from despesas_divididas.application.schemas.ledger_commands import (
    ExpenseCommand,
    SettlementCommand,
)
from despesas_divididas.domain.expense import Expense
from despesas_divididas.domain.value_objects import Money

AMOUNT_PATTERN = r"^-?[0-9]+\.[0-9]{2}$"


class CreateExpenseRequest(ExpenseCommand):
    """Payload for registering an expense."""


class CreateSettlementRequest(SettlementCommand):
    """Payload for recording a settlement."""


class SplitResponse(BaseModel):
    """Serialized split line."""

    participant_id: int
    amount: str = Field(pattern=AMOUNT_PATTERN)


class ExpenseResponse(BaseModel):
    """Serialized expense returned by API."""

    id: int
    group_id: int | None
    payer_id: int
    amount: str = Field(pattern=AMOUNT_PATTERN)
    note: str
    created_at: datetime
    splits: list[SplitResponse]

    @classmethod
    def from_model(cls, expense: Expense) -> ExpenseResponse:
        return cls(
            id=expense.id,
            group_id=expense.group_id,
            payer_id=expense.payer_id,
            amount=expense.total_amount.format(),
            note=expense.note,
            created_at=expense.created_at,
            splits=[
                SplitResponse(
                    participant_id=split.participant_id,
                    amount=split.amount.format(),
                )
                for split in expense.splits
            ],
        )


class ExpenseListResponse(BaseModel):
    """Expense log payload."""

    items: list[ExpenseResponse]
    total: int = Field(ge=0)

    @classmethod
    def from_models(cls, expenses: list[Expense]) -> ExpenseListResponse:
        return cls(
            items=[ExpenseResponse.from_model(item) for item in expenses],
            total=len(expenses),
        )


class SettlementResponse(BaseModel):
    """Serialized settlement."""

    payer_id: int
    payee_id: int
    amount: str = Field(pattern=AMOUNT_PATTERN)

    @classmethod
    def from_values(
        cls, *, payer_id: int, payee_id: int, amount: Money
    ) -> SettlementResponse:
        return cls(payer_id=payer_id, payee_id=payee_id, amount=amount.format())
