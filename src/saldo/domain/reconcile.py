"""Balance reconciliation arithmetic.

The running balance is maintained incrementally: every create, edit or
delete of a transaction is paired with one signed delta. These functions
compute that delta; they never read or write storage.

Deltas by operation:

    create                +amount for income, -amount for expense
    delete                -amount for income, +amount for expense
    edit income->income   new - old
    edit expense->expense old - new
    edit income->expense  -old - new
    edit expense->income  old + new
"""

from decimal import Decimal
from typing import Optional, Protocol

from saldo.domain.entities import TransactionKind

ZERO = Decimal("0")


class TransactionState(Protocol):
    """Anything carrying the fields that affect the balance."""

    kind: TransactionKind
    amount: Decimal


def signed_amount(kind: TransactionKind, amount: Decimal) -> Decimal:
    """Return the amount with the sign implied by the transaction kind."""
    if TransactionKind(kind) == TransactionKind.INCOME:
        return amount
    return -amount


def balance_delta(
    before: Optional[TransactionState], after: Optional[TransactionState]
) -> Decimal:
    """Signed change to the balance when a transaction goes from before to after.

    Args:
        before: Prior state, or None for a create
        after: New state, or None for a delete

    Returns:
        Delta to add to the running balance
    """
    old = signed_amount(before.kind, before.amount) if before is not None else ZERO
    new = signed_amount(after.kind, after.amount) if after is not None else ZERO
    return new - old


def reconcile_create(balance: Decimal, txn: TransactionState) -> Decimal:
    return balance + balance_delta(None, txn)


def reconcile_delete(balance: Decimal, txn: TransactionState) -> Decimal:
    return balance + balance_delta(txn, None)


def reconcile_edit(
    balance: Decimal, before: TransactionState, after: TransactionState
) -> Decimal:
    return balance + balance_delta(before, after)
