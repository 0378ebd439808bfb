"""Readable transfer instructions for open ledger balances."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from despesas_divididas.domain.value_objects import Money, ParticipantId


@dataclass(frozen=True, slots=True)
class TransferInstruction:
    """Who has to pay whom to clear one balance pair."""

    debtor_id: ParticipantId
    creditor_id: ParticipantId
    amount: Money
    message: str


def describe_balance(
    low_id: ParticipantId,
    high_id: ParticipantId,
    amount: Money,
    display_names: Mapping[ParticipantId, str] | None = None,
) -> TransferInstruction:
    """Turn a stored ``(low, high) -> amount`` entry into a transfer instruction."""
    if amount.is_zero():
        raise ValueError("Settled pairs are not kept in the ledger")

    if amount.is_negative():
        debtor_id, creditor_id = low_id, high_id
    else:
        debtor_id, creditor_id = high_id, low_id

    names = display_names or {}
    debtor = names.get(debtor_id, str(debtor_id))
    creditor = names.get(creditor_id, str(creditor_id))
    transfer = amount.absolute()
    return TransferInstruction(
        debtor_id=debtor_id,
        creditor_id=creditor_id,
        amount=transfer,
        message=f"{debtor} owes {transfer} to {creditor}.",
    )


def describe_ledger(
    entries: list[tuple[ParticipantId, ParticipantId, Money]],
    display_names: Mapping[ParticipantId, str] | None = None,
) -> list[TransferInstruction]:
    return [
        describe_balance(low_id, high_id, amount, display_names)
        for low_id, high_id, amount in entries
    ]
