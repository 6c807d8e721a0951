# tests/test_pricing.py
from decimal import Decimal

import pytest

from virtual_art.domain.pricing import grand_total, subtotal, tax_for


@pytest.mark.parametrize(
    "amount, tax",
    [(0, 0), (100, 2), (2500, 50), (999999, 20000)],
)
def test_tax_and_grand_total(amount, tax):
    assert tax_for(amount) == Decimal(tax)
    assert grand_total(amount) == Decimal(amount) + Decimal(tax)


def test_tax_rounds_half_up():
    assert tax_for(25) == Decimal("1")
    assert tax_for(24) == Decimal("0")


def test_subtotal_handles_float_prices():
    assert subtotal([(19.99, 3), ("5.01", 1)]) == Decimal("64.98")
