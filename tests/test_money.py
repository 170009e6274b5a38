"""Tests for decimal currency helpers."""

from decimal import Decimal

import pytest

from shelfprice.money import (
    HALF_PRICE,
    TWENTY_OFF,
    apply_rate,
    format_money,
    round_money,
    to_money,
)


class TestToMoney:
    def test_float_keeps_literal(self):
        assert to_money(5.99) == Decimal("5.99")

    def test_string(self):
        assert to_money(" 2.99 ") == Decimal("2.99")

    def test_int(self):
        assert to_money(4) == Decimal("4")

    def test_decimal_passthrough(self):
        value = Decimal("1.234")
        assert to_money(value) is value

    def test_garbage(self):
        with pytest.raises(ValueError):
            to_money("abc")

    def test_nan(self):
        with pytest.raises(ValueError):
            to_money("NaN")

    def test_bool_rejected(self):
        with pytest.raises(ValueError):
            to_money(True)


class TestRounding:
    def test_half_up_on_tie(self):
        assert round_money(Decimal("2.995")) == Decimal("3.00")
        assert round_money(Decimal("1.495")) == Decimal("1.50")

    def test_below_tie(self):
        assert round_money(Decimal("2.994")) == Decimal("2.99")

    def test_two_places(self):
        assert round_money(Decimal("3")).as_tuple().exponent == -2

    def test_apply_half(self):
        assert apply_rate(Decimal("5.99"), HALF_PRICE) == Decimal("3.00")

    def test_apply_twenty_off(self):
        assert apply_rate(Decimal("2.99"), TWENTY_OFF) == Decimal("2.39")


def test_format_money():
    assert format_money(Decimal("5")) == "5.00"
    assert format_money(Decimal("4.99")) == "4.99"
    assert format_money(Decimal("0.125")) == "0.13"
