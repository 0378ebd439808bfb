"""Use case replaying a scripted sequence of ledger operations."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from despesas_divididas.application.schemas.ledger_commands import (
    ExpenseCommand,
    GroupCommand,
    SettlementCommand,
    UserCommand,
)
from despesas_divididas.application.use_cases.submit_operations import (
    submit_expense,
    submit_settlement,
)
from despesas_divididas.core.settings import Settings, get_settings
from despesas_divididas.services.balance_report_service import describe_ledger
from despesas_divididas.services.ledger_context import create_ledger_context


class ExpenseOperation(ExpenseCommand):
    """Scripted expense."""

    kind: Literal["expense"]


class SettlementOperation(SettlementCommand):
    """Scripted settlement."""

    kind: Literal["settlement"]


LedgerOperation = Annotated[
    ExpenseOperation | SettlementOperation,
    Field(discriminator="kind"),
]


class LedgerScriptRequest(BaseModel):
    """Users and groups to register, then operations applied in order.

    Users get ids 1, 2, 3... in the order they are listed, and groups
    likewise, so operations can reference them by position.
    """

    users: list[UserCommand] = Field(min_length=1)
    groups: list[GroupCommand] = Field(default_factory=list)
    operations: list[LedgerOperation] = Field(default_factory=list)


class BalanceLine(BaseModel):
    """Open balance rendered for reports."""

    debtor_id: int
    creditor_id: int
    amount: str
    message: str


class LedgerScriptReport(BaseModel):
    """Outcome of a replayed script."""

    users: int = Field(ge=0)
    groups: int = Field(ge=0)
    expenses: int = Field(ge=0)
    settlements: int = Field(ge=0)
    balances: list[BalanceLine] = Field(default_factory=list)


class RunLedgerScriptUseCase:
    """Replay a ledger script against a fresh in-memory context."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    def execute(self, request: LedgerScriptRequest) -> LedgerScriptReport:
        context = create_ledger_context(self._settings)
        for user in request.users:
            context.directory.create_user(user.name, user.email)
        for group in request.groups:
            context.directory.create_group(group.name, group.member_ids)

        settlements = 0
        for operation in request.operations:
            if isinstance(operation, SettlementOperation):
                submit_settlement(context, operation)
                settlements += 1
            else:
                submit_expense(context, operation)

        instructions = describe_ledger(
            context.engine.all_ledger_entries(),
            context.directory.display_names(),
        )
        return LedgerScriptReport(
            users=len(request.users),
            groups=len(request.groups),
            expenses=context.engine.expense_count(),
            settlements=settlements,
            balances=[
                BalanceLine(
                    debtor_id=instruction.debtor_id,
                    creditor_id=instruction.creditor_id,
                    amount=instruction.amount.format(),
                    message=instruction.message,
                )
                for instruction in instructions
            ],
        )
