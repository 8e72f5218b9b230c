"""Utility functions for saldo."""

from saldo.utils.date_parser import parse_datetime
from saldo.utils.amount_parser import parse_amount
from saldo.utils.currency import format_currency, format_compact
from saldo.utils.timestamps import SerializedInstant, normalize_instant

__all__ = [
    "parse_datetime",
    "parse_amount",
    "format_currency",
    "format_compact",
    "SerializedInstant",
    "normalize_instant",
]
