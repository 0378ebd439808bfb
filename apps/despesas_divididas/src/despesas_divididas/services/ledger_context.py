"""Wiring of the in-memory ledger, expense log, directory and engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo

from despesas_divididas.core.settings import Settings
from despesas_divididas.domain.ledger import Ledger
from despesas_divididas.repositories.directory_repository import InMemoryDirectory
from despesas_divididas.repositories.expense_repository import (
    InMemoryExpenseRepository,
)
from despesas_divididas.services.expense_engine import ExpenseEngine


@dataclass(frozen=True, slots=True)
class LedgerContext:
    """All state of one running ledger instance."""

    directory: InMemoryDirectory
    expense_repository: InMemoryExpenseRepository
    ledger: Ledger
    engine: ExpenseEngine


def create_ledger_context(settings: Settings) -> LedgerContext:
    """Build a fresh, empty ledger context."""

    timezone = ZoneInfo(settings.app_timezone)
    directory = InMemoryDirectory()
    expense_repository = InMemoryExpenseRepository()
    ledger = Ledger()
    engine = ExpenseEngine(
        ledger=ledger,
        expense_repository=expense_repository,
        directory=directory,
        clock=lambda: datetime.now(tz=timezone),
    )
    return LedgerContext(
        directory=directory,
        expense_repository=expense_repository,
        ledger=ledger,
        engine=engine,
    )
