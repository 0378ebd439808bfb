from __future__ import annotations

from decimal import Decimal

import pytest

from despesas_divididas.domain.errors import InvalidAmountError
from despesas_divididas.domain.expense import sum_splits
from despesas_divididas.domain.split_calculator import equal_split, percentage_split
from despesas_divididas.domain.value_objects import Money


def money(value: str) -> Money:
    return Money.from_decimal_string(value)


def test_equal_split_gives_remainder_cent_to_first_participant() -> None:
    splits = equal_split(money("100.00"), [1, 2, 3])

    assert [(split.participant_id, split.amount) for split in splits] == [
        (1, money("33.34")),
        (2, money("33.33")),
        (3, money("33.33")),
    ]
    assert sum_splits(splits) == money("100.00")


def test_equal_split_without_remainder() -> None:
    splits = equal_split(money("300.00"), [1, 2, 3])

    assert [split.amount for split in splits] == [money("100.00")] * 3


def test_equal_split_follows_iteration_order() -> None:
    splits = equal_split(money("0.05"), [9, 4, 7])

    assert [(split.participant_id, split.amount.cents) for split in splits] == [
        (9, 2),
        (4, 2),
        (7, 1),
    ]


def test_equal_split_is_exact_for_many_totals_and_group_sizes() -> None:
    for cents in (1, 2, 99, 100, 101, 1_000, 9_999, 123_457, 1_000_001):
        for size in range(1, 13):
            total = Money(cents=cents)
            participants = list(range(1, size + 1))

            splits = equal_split(total, participants)
            amounts = [split.amount.cents for split in splits]

            assert sum_splits(splits) == total
            assert max(amounts) - min(amounts) <= 1
            assert amounts == sorted(amounts, reverse=True)


def test_equal_split_with_more_people_than_cents_allows_zero_shares() -> None:
    splits = equal_split(money("0.02"), [1, 2, 3])

    assert [split.amount.cents for split in splits] == [1, 1, 0]


def test_equal_split_requires_participants() -> None:
    with pytest.raises(InvalidAmountError):
        equal_split(money("10.00"), [])


def test_equal_split_rejects_negative_total() -> None:
    with pytest.raises(InvalidAmountError):
        equal_split(money("-10.00"), [1, 2])


def test_percentage_split_distributes_leftover_cents() -> None:
    splits = percentage_split(
        money("100.00"),
        [(1, Decimal("33.33")), (2, Decimal("33.33")), (3, Decimal("33.34"))],
    )

    assert [split.amount for split in splits] == [
        money("33.33"),
        money("33.33"),
        money("33.34"),
    ]


def test_percentage_split_is_exact_when_shares_have_fractions_of_a_cent() -> None:
    splits = percentage_split(
        money("10.00"),
        [(1, Decimal("0")), (2, Decimal("33.3333")), (3, Decimal("66.6667"))],
    )

    assert sum_splits(splits) == money("10.00")
    assert splits[0].amount == Money.zero()
    assert splits[1].amount == money("3.34")
    assert splits[2].amount == money("6.66")


def test_percentage_split_requires_percentages_summing_to_100() -> None:
    with pytest.raises(InvalidAmountError) as error:
        percentage_split(money("10.00"), [(1, Decimal("50")), (2, Decimal("49"))])

    assert error.value.details == {"percentage_total": "99"}


def test_percentage_split_sums_long_percentages_exactly() -> None:
    almost_half = Decimal("50.00000000000000000000000000001")

    with pytest.raises(InvalidAmountError) as error:
        percentage_split(money("10.00"), [(1, Decimal("50")), (2, almost_half)])

    assert error.value.details == {
        "percentage_total": "100.00000000000000000000000000001"
    }


def test_percentage_split_rejects_negative_percentage() -> None:
    with pytest.raises(InvalidAmountError):
        percentage_split(money("10.00"), [(1, Decimal("110")), (2, Decimal("-10"))])


def test_percentage_split_requires_participants() -> None:
    with pytest.raises(InvalidAmountError):
        percentage_split(money("10.00"), [])
