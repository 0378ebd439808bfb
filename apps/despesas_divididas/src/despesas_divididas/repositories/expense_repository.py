"""Append-only expense log."""

from __future__ import annotations

from itertools import count

from despesas_divididas.domain.expense import Expense
from despesas_divididas.domain.value_objects import GroupId


class InMemoryExpenseRepository:
    """Stores accepted expenses in creation order.

    Not synchronised on its own: writers hold the ledger transaction while
    reserving an id and appending.
    """

    def __init__(self) -> None:
        self._expenses: dict[int, Expense] = {}
        self._ids = count(1)

    def next_id(self) -> int:
        return next(self._ids)

    def append(self, expense: Expense) -> Expense:
        if expense.id in self._expenses:
            raise ValueError(f"Expense {expense.id} is already recorded")
        self._expenses[expense.id] = expense
        return expense

    def get(self, expense_id: int) -> Expense | None:
        return self._expenses.get(expense_id)

    def list_expenses(self, group_id: GroupId | None = None) -> list[Expense]:
        expenses = list(self._expenses.values())
        if group_id is None:
            return expenses
        return [expense for expense in expenses if expense.group_id == group_id]

    def __len__(self) -> int:
        return len(self._expenses)
