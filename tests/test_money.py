"""Tests for Money."""

from decimal import Decimal

import pytest

from checkout_api.core.domain.model.money import Money, fold_money


class TestMoney:
    def test_of_quantizes_to_cents(self):
        assert Money.of("10.005").amount == Decimal("10.01")
        assert Money.of(20).amount == Decimal("20.00")

    def test_multiply_by_decimal_weight(self):
        assert (Money.of(10) * Decimal("1.1")).amount == Decimal("11.00")

    def test_add_and_subtract(self):
        assert (Money.of(450) + Money.of(31)).amount == Decimal("481.00")
        assert (Money.of(1500) - Money.of(481)).amount == Decimal("1019.00")

    def test_ordering(self):
        assert Money.of(50) < Money.of(500)
        assert Money.of(500) > Money.of(50)
        assert not Money.of(50) < Money.of(50)

    def test_truncated_does_not_round(self):
        assert Money.of("99.99").truncated() == 99
        assert Money.of("0.51").truncated() == 0
        assert Money.of("-1.50").truncated() == -1

    def test_currency_mismatch_raises(self):
        with pytest.raises(ValueError):
            Money.of(1) + Money.of(1, currency="USD")

    def test_fold_money_of_nothing_is_zero(self):
        assert fold_money([]).is_zero()
        assert fold_money([Money.of(1), Money.of(2)]).amount == Decimal("3.00")
