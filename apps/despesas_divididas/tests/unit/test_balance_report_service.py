import pytest

from despesas_divididas.domain.value_objects import Money
from despesas_divididas.services.balance_report_service import (
    describe_balance,
    describe_ledger,
)


def test_positive_entry_means_high_participant_pays() -> None:
    instruction = describe_balance(1, 2, Money(cents=5000), {1: "Alice", 2: "Bob"})

    assert instruction.debtor_id == 2
    assert instruction.creditor_id == 1
    assert instruction.amount == Money(cents=5000)
    assert instruction.message == "Bob owes 50.00 to Alice."


def test_negative_entry_means_low_participant_pays() -> None:
    instruction = describe_balance(1, 2, Money(cents=-1000))

    assert instruction.debtor_id == 1
    assert instruction.creditor_id == 2
    assert instruction.amount == Money(cents=1000)
    assert instruction.message == "1 owes 10.00 to 2."


def test_zero_entry_is_rejected() -> None:
    with pytest.raises(ValueError):
        describe_balance(1, 2, Money.zero())


def test_describe_ledger_keeps_entry_order() -> None:
    instructions = describe_ledger(
        [(1, 3, Money(cents=100)), (1, 2, Money(cents=-200))],
        {1: "Alice", 2: "Bob", 3: "Charlie"},
    )

    assert [instruction.message for instruction in instructions] == [
        "Charlie owes 1.00 to Alice.",
        "Alice owes 2.00 to Bob.",
    ]
