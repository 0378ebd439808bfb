from decimal import Decimal

import pytest

from despesas_divididas.domain.errors import InvalidAmountError
from despesas_divididas.domain.money import format_money, parse_money, quantize_money
from despesas_divididas.domain.value_objects import Money


def test_quantize_money_uses_round_half_up() -> None:
    assert quantize_money(Decimal("10.005")) == Decimal("10.01")
    assert quantize_money(Decimal("10.004")) == Decimal("10.00")


def test_parse_money_returns_quantized_decimal() -> None:
    assert parse_money("2.675") == Decimal("2.68")


def test_parse_money_rejects_malformed_and_non_finite_values() -> None:
    with pytest.raises(InvalidAmountError):
        parse_money("ten")
    with pytest.raises(InvalidAmountError):
        parse_money("NaN")
    with pytest.raises(InvalidAmountError):
        parse_money("Infinity")


def test_format_money_has_two_decimal_places() -> None:
    assert format_money(Decimal("5")) == "5.00"


def test_money_from_string_keeps_cents_and_rounds_half_up() -> None:
    assert Money.from_decimal_string("100.00").cents == 10000
    assert Money.from_decimal_string("0.005").cents == 1
    assert Money.from_decimal_string("-1.25").cents == -125


def test_money_equality_compares_rounded_values() -> None:
    assert Money.from_decimal_string("10.001") == Money.from_decimal_string("10.00")
    assert Money.from_decimal_string("10.01") > Money.from_decimal_string("10.00")


def test_money_arithmetic_stays_on_cent_grid() -> None:
    total = Money.zero()
    for _ in range(10):
        total = total + Money.from_decimal_string("0.10")

    assert total == Money.from_decimal_string("1.00")
    assert total - Money.from_decimal_string("0.30") == Money(cents=70)
    assert -total == Money(cents=-100)
    assert Money(cents=333).multiply_by_int(3) == Money(cents=999)


def test_divide_into_shares_returns_floor_share_and_remainder() -> None:
    share, remainder = Money.from_decimal_string("100.00").divide_into_shares(3)

    assert share == Money.from_decimal_string("33.33")
    assert remainder == Money(cents=1)
    assert share.multiply_by_int(3) + remainder == Money.from_decimal_string("100.00")


def test_divide_into_shares_rejects_non_positive_count() -> None:
    with pytest.raises(InvalidAmountError):
        Money.from_decimal_string("10.00").divide_into_shares(0)
    with pytest.raises(InvalidAmountError):
        Money.from_decimal_string("10.00").divide_into_shares(-2)


def test_non_negative_rejects_negative_amounts() -> None:
    assert Money.non_negative("0.00").is_zero()
    assert Money.non_negative(Decimal("1.5")) == Money(cents=150)

    with pytest.raises(InvalidAmountError) as error:
        Money.non_negative("-0.01")

    assert error.value.code == "INVALID_AMOUNT"
    assert error.value.details == {"amount": "-0.01"}


def test_money_rejects_non_integer_cents() -> None:
    with pytest.raises(TypeError):
        Money(cents=1.5)  # type: ignore[arg-type]


def test_money_formats_negative_values() -> None:
    assert str(Money(cents=-5)) == "-0.05"
    assert Money(cents=12345).to_decimal() == Decimal("123.45")


def test_parse_money_rejects_amounts_beyond_decimal_precision() -> None:
    with pytest.raises(InvalidAmountError) as error:
        parse_money("12345678901234567890123456789.00")

    assert error.value.code == "INVALID_AMOUNT"
    assert error.value.details == {"value": "12345678901234567890123456789.00"}
