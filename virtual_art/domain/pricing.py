# virtual_art/domain/pricing.py
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Tuple

from virtual_art.utils.settings import TAX_RATE as _TAX_RATE

TAX_RATE = Decimal(_TAX_RATE)
SHIPPING_FEE = Decimal("0")


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def subtotal(lines: Iterable[Tuple[object, int]]) -> Decimal:
    """Suma cena * ilosc dla par (price, quantity)."""
    return sum((to_decimal(price) * qty for price, qty in lines), Decimal("0"))


def tax_for(amount) -> Decimal:
    # podatek zaokraglany do pelnej jednostki waluty, polowki w gore
    return (to_decimal(amount) * TAX_RATE).quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def grand_total(amount) -> Decimal:
    amount = to_decimal(amount)
    return amount + tax_for(amount) + SHIPPING_FEE
