"""Mapper functions to convert between domain models and SQLAlchemy models.

This is the storage boundary: timestamps are normalised to canonical
instants here, before any domain code sees them.
"""

from decimal import Decimal

from saldo.domain import entities as domain
from saldo.database.models import (
    User as ORMUser,
    Balance as ORMBalance,
    Transaction as ORMTransaction,
)
from saldo.utils.timestamps import normalize_instant


def user_to_domain(orm_user: ORMUser) -> domain.User:
    """Convert SQLAlchemy User model to domain User entity."""
    return domain.User(
        uid=orm_user.uid,
        email=orm_user.email,
        username=orm_user.username,
        created_at=normalize_instant(orm_user.created_at),
    )


def balance_to_domain(orm_balance: ORMBalance) -> domain.Balance:
    """Convert SQLAlchemy Balance model to domain Balance entity."""
    return domain.Balance(
        owner_id=orm_balance.owner_id,
        current=Decimal(orm_balance.current),
        last_updated=normalize_instant(orm_balance.last_updated),
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        owner_id=orm_transaction.owner_id,
        amount=Decimal(orm_transaction.amount),
        kind=domain.TransactionKind(orm_transaction.kind),
        category=orm_transaction.category,
        description=orm_transaction.description or "",
        occurred_at=normalize_instant(orm_transaction.occurred_at),
    )
