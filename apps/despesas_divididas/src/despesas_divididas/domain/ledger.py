"""Pairwise debt ledger keyed by canonical participant pairs."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from threading import RLock

from despesas_divididas.domain.balance_pair import BalancePair
from despesas_divididas.domain.value_objects import Money, ParticipantId

logger = logging.getLogger(__name__)


class Ledger:
    """Net balances between participants.

    A stored value ``v`` for ``(low, high)`` means ``high`` owes ``low`` the
    amount ``v``; a negative ``v`` means ``low`` owes ``high``. Pairs whose
    net reaches zero are dropped, so only open balances are kept.

    ``adjust`` is the only mutation. All reads and writes go through one
    re-entrant lock, which callers can also hold via ``transaction()`` to
    make several adjustments visible as a unit.
    """

    def __init__(self) -> None:
        self._balances: dict[BalancePair, Money] = {}
        self._lock = RLock()

    @contextmanager
    def transaction(self) -> Iterator[None]:
        with self._lock:
            yield

    def adjust(
        self,
        creditor_id: ParticipantId,
        debtor_id: ParticipantId,
        delta: Money,
    ) -> None:
        """Increase what ``debtor_id`` owes ``creditor_id`` by ``delta``.

        A negative delta pays the debt down.
        """
        if creditor_id == debtor_id:
            return

        pair = BalancePair.canonicalize(creditor_id, debtor_id)
        signed_delta = delta if pair.low == creditor_id else -delta
        with self._lock:
            updated = self._balances.get(pair, Money.zero()) + signed_delta
            if updated.is_zero():
                if self._balances.pop(pair, None) is not None:
                    logger.debug(
                        "ledger_entry_cleared",
                        extra={"pair_low": pair.low, "pair_high": pair.high},
                    )
            else:
                self._balances[pair] = updated

    def balance_of(self, user_id: ParticipantId, counterparty_id: ParticipantId) -> Money:
        """Return what ``counterparty_id`` owes ``user_id`` (negative if reversed)."""
        pair = BalancePair.canonicalize(user_id, counterparty_id)
        with self._lock:
            amount = self._balances.get(pair, Money.zero())
        return amount if pair.low == user_id else -amount

    def net_balances(self, user_id: ParticipantId) -> dict[ParticipantId, Money]:
        """Map each counterparty of ``user_id`` to the signed amount it owes them."""
        result: dict[ParticipantId, Money] = {}
        with self._lock:
            for pair, amount in self._balances.items():
                if not pair.involves(user_id):
                    continue
                counterparty = pair.counterparty_of(user_id)
                result[counterparty] = amount if pair.low == user_id else -amount
        return result

    def all_entries(self) -> list[tuple[BalancePair, Money]]:
        with self._lock:
            return list(self._balances.items())

    def __len__(self) -> int:
        with self._lock:
            return len(self._balances)
