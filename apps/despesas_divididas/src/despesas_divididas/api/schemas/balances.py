"""Schemas for balance query endpoints."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, Field

from despesas_divididas.domain.value_objects import Money
from despesas_divididas.services.balance_report_service import TransferInstruction

AMOUNT_PATTERN = r"^-?[0-9]+\.[0-9]{2}$"


class LedgerEntryResponse(BaseModel):
    """One open balance pair.

    ``amount`` is signed from ``low_participant_id``'s point of view:
    positive when the high participant owes the low one.
    """

    low_participant_id: int
    high_participant_id: int
    amount: str = Field(pattern=AMOUNT_PATTERN)
    debtor_id: int
    creditor_id: int
    message: str

    @classmethod
    def from_entry(
        cls,
        low_id: int,
        high_id: int,
        amount: Money,
        instruction: TransferInstruction,
    ) -> LedgerEntryResponse:
        return cls(
            low_participant_id=low_id,
            high_participant_id=high_id,
            amount=amount.format(),
            debtor_id=instruction.debtor_id,
            creditor_id=instruction.creditor_id,
            message=instruction.message,
        )


class LedgerResponse(BaseModel):
    """All open balances."""

    entries: list[LedgerEntryResponse]


class CounterpartyBalance(BaseModel):
    """Signed balance with one counterparty; positive means they owe the user."""

    counterparty_id: int
    amount: str = Field(pattern=AMOUNT_PATTERN)


class UserBalancesResponse(BaseModel):
    """Net balances of one user."""

    user_id: int
    balances: list[CounterpartyBalance]

    @classmethod
    def from_mapping(
        cls, user_id: int, balances: Mapping[int, Money]
    ) -> UserBalancesResponse:
        return cls(
            user_id=user_id,
            balances=[
                CounterpartyBalance(counterparty_id=counterparty, amount=amount.format())
                for counterparty, amount in balances.items()
            ],
        )
