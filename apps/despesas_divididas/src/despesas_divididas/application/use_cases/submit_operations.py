"""Dispatch of expense and settlement commands to the engine."""

from __future__ import annotations

from decimal import Decimal

from despesas_divididas.application.schemas.ledger_commands import (
    ExpenseCommand,
    SettlementCommand,
)
from despesas_divididas.domain.errors import UnknownGroupError
from despesas_divididas.domain.expense import Expense, Split
from despesas_divididas.domain.value_objects import Money, ParticipantId
from despesas_divididas.services.ledger_context import LedgerContext


def _equal_participants(
    context: LedgerContext, command: ExpenseCommand
) -> list[ParticipantId]:
    if command.participants is not None:
        return command.participants

    group_id = command.group_id
    group = context.directory.get_group(group_id) if group_id is not None else None
    if group is None:
        raise UnknownGroupError(details={"group_id": group_id})
    return list(group.member_ids)


def submit_expense(context: LedgerContext, command: ExpenseCommand) -> Expense:
    """Register ``command`` with the engine and return the stored expense."""

    total_amount = Money.from_decimal_string(command.amount)
    engine = context.engine

    if command.split_type == "equal":
        return engine.create_equal_expense(
            payer_id=command.payer_id,
            total_amount=total_amount,
            participants=_equal_participants(context, command),
            note=command.note,
            group_id=command.group_id,
        )

    if command.split_type == "percentage":
        return engine.create_percentage_expense(
            payer_id=command.payer_id,
            total_amount=total_amount,
            percentages=[
                (item.participant_id, Decimal(item.percentage))
                for item in command.percentages or []
            ],
            note=command.note,
            group_id=command.group_id,
        )

    return engine.create_expense(
        payer_id=command.payer_id,
        total_amount=total_amount,
        splits=[
            Split(
                participant_id=item.participant_id,
                amount=Money.non_negative(item.amount),
            )
            for item in command.splits or []
        ],
        note=command.note,
        group_id=command.group_id,
    )


def submit_settlement(context: LedgerContext, command: SettlementCommand) -> Money:
    """Record ``command`` and return the settled amount."""

    amount = Money.from_decimal_string(command.amount)
    context.engine.record_settlement(
        payer_id=command.payer_id,
        payee_id=command.payee_id,
        amount=amount,
    )
    return amount
