"""Tests for amount parsing."""

import pytest
from decimal import Decimal

from saldo.utils.amount_parser import parse_amount


@pytest.mark.parametrize(
    "text,expected",
    [
        ("50000", Decimal("50000")),
        ("Rp50000", Decimal("50000")),
        ("Rp 1,500,000", Decimal("1500000")),
        ("rp.2500", Decimal("2500")),
        ("1500.50", Decimal("1500.50")),
        ("$12", Decimal("12")),
        ("0", Decimal("0")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


def test_empty_amount():
    with pytest.raises(ValueError, match="Amount is required"):
        parse_amount("   ")


def test_negative_amount():
    with pytest.raises(ValueError, match="must not be negative"):
        parse_amount("-100")


@pytest.mark.parametrize("text", ["abc", "12a", "Infinity", "NaN"])
def test_unparseable_amount(text):
    with pytest.raises(ValueError):
        parse_amount(text)
