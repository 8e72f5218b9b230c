"""Tests for Database interface returning domain models."""

import pytest
from datetime import datetime, UTC
from decimal import Decimal

from saldo.domain import entities
from saldo.domain.entities import TransactionKind

OCCURRED = datetime(2024, 6, 1, 10, 0, tzinfo=UTC)


def add_transaction(db, owner_id, amount="1000", kind=TransactionKind.EXPENSE, occurred_at=OCCURRED):
    return db.create_transaction(
        owner_id=owner_id,
        amount=Decimal(amount),
        kind=kind,
        category="Food",
        description="",
        occurred_at=occurred_at,
    )


@pytest.fixture
def owner_id(temp_db):
    return temp_db.create_user(email="owner@example.com", username="owner", password_hash="x")


class TestDatabaseInterface:
    """Tests to verify Database interface returns domain models."""

    def test_get_user_returns_domain_model(self, temp_db, owner_id):
        """Test that get_user returns a domain User entity."""
        user = temp_db.get_user(owner_id)

        assert isinstance(user, entities.User)
        assert user.uid == owner_id
        assert user.email == "owner@example.com"
        assert temp_db.get_user_by_email("owner@example.com") == user
        assert temp_db.get_user("missing") is None

    def test_get_transaction_returns_domain_model(self, temp_db, owner_id):
        """Test that get_transaction returns a canonical domain Transaction."""
        transaction_id = add_transaction(temp_db, owner_id, amount="12500.50")

        txn = temp_db.get_transaction(transaction_id)

        assert isinstance(txn, entities.Transaction)
        assert isinstance(txn.id, int)
        assert txn.amount == Decimal("12500.50")
        assert txn.kind is TransactionKind.EXPENSE
        assert txn.occurred_at == OCCURRED
        assert txn.occurred_at.tzinfo is not None

    def test_list_transactions_newest_first(self, temp_db, owner_id):
        older = add_transaction(temp_db, owner_id, occurred_at=datetime(2024, 1, 1, tzinfo=UTC))
        newer = add_transaction(temp_db, owner_id, occurred_at=datetime(2024, 2, 1, tzinfo=UTC))

        assert [t.id for t in temp_db.list_transactions(owner_id)] == [newer, older]
        assert temp_db.list_transactions("someone-else") == []

    def test_update_and_delete_missing_transaction(self, temp_db):
        with pytest.raises(ValueError):
            temp_db.update_transaction(404, amount=Decimal("1"))
        with pytest.raises(ValueError):
            temp_db.delete_transaction(404)

    def test_get_balance_returns_domain_model(self, temp_db, owner_id):
        assert temp_db.get_balance(owner_id) is None

        temp_db.set_balance(owner_id, Decimal("2500"))
        balance = temp_db.get_balance(owner_id)

        assert isinstance(balance, entities.Balance)
        assert balance.current == Decimal("2500")
        assert balance.last_updated.tzinfo is not None


class TestAtomic:
    """Tests for the unit of work."""

    def test_exception_rolls_back_every_write(self, temp_db, owner_id):
        temp_db.set_balance(owner_id, Decimal("100"))

        with pytest.raises(RuntimeError):
            with temp_db.atomic():
                add_transaction(temp_db, owner_id)
                temp_db.set_balance(owner_id, Decimal("0"))
                raise RuntimeError("boom")

        assert temp_db.list_transactions(owner_id) == []
        assert temp_db.get_balance(owner_id).current == Decimal("100")

    def test_nested_blocks_commit_once(self, temp_db, owner_id):
        with temp_db.atomic():
            with temp_db.atomic():
                add_transaction(temp_db, owner_id)
            temp_db.set_balance(owner_id, Decimal("-1000"))

        assert len(temp_db.list_transactions(owner_id)) == 1
        assert temp_db.get_balance(owner_id).current == Decimal("-1000")


class TestSubscriptions:
    """Tests for the push-style change feeds."""

    def test_transaction_feed_delivers_snapshot_immediately_and_on_change(self, temp_db, owner_id):
        received = []
        subscription = temp_db.subscribe_transactions(owner_id, received.append)

        transaction_id = add_transaction(temp_db, owner_id)
        temp_db.update_transaction(transaction_id, amount=Decimal("2000"))
        temp_db.delete_transaction(transaction_id)

        assert [len(snapshot) for snapshot in received] == [0, 1, 1, 0]
        assert received[2][0].amount == Decimal("2000")
        assert subscription.active

    def test_unsubscribe_stops_delivery(self, temp_db, owner_id):
        received = []
        subscription = temp_db.subscribe_transactions(owner_id, received.append)

        subscription.unsubscribe()
        subscription.unsubscribe()
        add_transaction(temp_db, owner_id)

        assert received == [[]]
        assert not subscription.active

    def test_subscription_as_context_manager(self, temp_db, owner_id):
        received = []
        with temp_db.subscribe_balance(owner_id, received.append):
            temp_db.set_balance(owner_id, Decimal("1"))
        temp_db.set_balance(owner_id, Decimal("2"))

        assert [b.current if b else None for b in received] == [None, Decimal("1")]

    def test_balance_notification_waits_for_commit(self, temp_db, owner_id):
        received = []
        temp_db.subscribe_balance(owner_id, received.append)

        with temp_db.atomic():
            temp_db.set_balance(owner_id, Decimal("50000"))
            assert received == [None]

        assert len(received) == 2
        assert received[1].current == Decimal("50000")

    def test_rolled_back_changes_are_not_announced(self, temp_db, owner_id):
        received = []
        temp_db.subscribe_transactions(owner_id, received.append)

        with pytest.raises(RuntimeError):
            with temp_db.atomic():
                add_transaction(temp_db, owner_id)
                raise RuntimeError("boom")

        assert received == [[]]

    def test_feeds_are_per_owner(self, temp_db, owner_id):
        other_id = temp_db.create_user(email="other@example.com", username="other", password_hash="x")
        mine, theirs = [], []
        temp_db.subscribe_transactions(owner_id, mine.append)
        temp_db.subscribe_transactions(other_id, theirs.append)

        add_transaction(temp_db, other_id)

        assert mine == [[]]
        assert len(theirs) == 2
