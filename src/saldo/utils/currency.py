"""Currency display helpers (Indonesian Rupiah)."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[Decimal, int, float]


def format_currency(amount: Number) -> str:
    """Format an amount as Rupiah without decimals, e.g. ``Rp 1.500.000``."""
    value = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    digits = f"{abs(value):,.0f}".replace(",", ".")
    return f"{sign}Rp {digits}"


def format_compact(amount: Number) -> str:
    """Short axis label: ``Rp2Jt`` for millions, ``Rp50Rb`` for thousands."""
    value = Decimal(str(amount))
    if value >= 1_000_000:
        return f"Rp{value / 1_000_000:.0f}Jt"
    if value >= 1_000:
        return f"Rp{value / 1_000:.0f}Rb"
    return f"Rp{value:f}"
