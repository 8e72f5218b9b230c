"""Tests for database mappers."""

from datetime import datetime, UTC
from decimal import Decimal

from saldo.database.models import (
    User as ORMUser,
    Balance as ORMBalance,
    Transaction as ORMTransaction,
)
from saldo.database.mappers import (
    user_to_domain,
    balance_to_domain,
    transaction_to_domain,
)
from saldo.domain.entities import Balance, Transaction, TransactionKind, User


class TestUserMapper:
    """Tests for User mapper."""

    def test_user_to_domain(self):
        """Test converting ORM User to domain User without the password hash."""
        orm_user = ORMUser(
            uid="abc123",
            email="budi@example.com",
            username="budi",
            password_hash="hashed",
            created_at=datetime(2024, 1, 1, 8, 0),
        )

        user = user_to_domain(orm_user)

        assert isinstance(user, User)
        assert user.uid == "abc123"
        assert user.created_at == datetime(2024, 1, 1, 8, 0, tzinfo=UTC)
        assert not hasattr(user, "password_hash")


class TestBalanceMapper:
    """Tests for Balance mapper."""

    def test_balance_to_domain(self):
        orm_balance = ORMBalance(
            owner_id="abc123",
            current=Decimal("150000.00"),
            last_updated=datetime(2024, 6, 1, 0, 0),
        )

        balance = balance_to_domain(orm_balance)

        assert isinstance(balance, Balance)
        assert balance.current == Decimal("150000")
        assert balance.last_updated.tzinfo is not None


class TestTransactionMapper:
    """Tests for Transaction mapper."""

    def test_transaction_to_domain(self):
        """Naive stored timestamps come back as aware UTC instants."""
        orm_transaction = ORMTransaction(
            id=7,
            owner_id="abc123",
            amount=Decimal("25000.00"),
            kind="income",
            category="Other",
            description=None,
            occurred_at=datetime(2024, 6, 1, 23, 45),
        )

        txn = transaction_to_domain(orm_transaction)

        assert isinstance(txn, Transaction)
        assert txn.id == 7
        assert txn.kind is TransactionKind.INCOME
        assert txn.amount == Decimal("25000")
        assert txn.description == ""
        assert txn.occurred_at == datetime(2024, 6, 1, 23, 45, tzinfo=UTC)

    def test_aware_timestamp_is_converted_to_utc(self):
        from datetime import timedelta, timezone

        orm_transaction = ORMTransaction(
            id=8,
            owner_id="abc123",
            amount=Decimal("1"),
            kind="expense",
            category="Food",
            description="",
            occurred_at=datetime(2024, 6, 2, 6, 0, tzinfo=timezone(timedelta(hours=7))),
        )

        txn = transaction_to_domain(orm_transaction)

        assert txn.occurred_at == datetime(2024, 6, 1, 23, 0, tzinfo=UTC)
        assert txn.occurred_at.utcoffset() == timedelta(0)
