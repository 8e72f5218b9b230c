"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a non-negative Decimal.

    Handles various formats:
    - "50000"
    - "Rp50000" / "Rp 50000"
    - "1,500,000"
    - "1500.50"

    Transaction amounts are magnitudes, the sign comes from the transaction
    kind, so negative values are rejected.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed or is negative
    """
    if amount_str is None or not str(amount_str).strip():
        raise ValueError("Amount is required")

    amount_str = str(amount_str).strip()

    # Remove currency symbols
    amount_str = re.sub(r"(?i)^rp\.?", "", amount_str)
    amount_str = re.sub(r"[$€£¥]", "", amount_str)

    # Remove thousands separators
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if amount < 0:
        raise ValueError("Amount must not be negative")
    return amount
