"""Transaction domain service."""

import logging
from dataclasses import replace
from datetime import datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Union

from saldo.database.base import Database
from saldo.domain import errors
from saldo.domain.analytics import sort_by_recent
from saldo.domain.balance import BalanceService
from saldo.domain.entities import CATEGORIES, Session, Transaction, TransactionKind
from saldo.domain.errors import NotFoundError, ValidationError
from saldo.domain.reconcile import reconcile_create, reconcile_delete, reconcile_edit
from saldo.utils.timestamps import normalize_instant, utcnow

logger = logging.getLogger(__name__)

# Amounts are stored with two decimal places
AMOUNT_QUANTUM = Decimal("0.01")


def validate_amount(amount: Optional[Decimal]) -> Decimal:
    """Amounts are required non-negative magnitudes."""
    if amount is None:
        raise ValidationError("Amount is required")
    try:
        amount = Decimal(amount)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(f"Could not parse amount '{amount}'")
    if not amount.is_finite() or amount < 0:
        raise ValidationError("Amount must be a non-negative number")
    try:
        return amount.quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValidationError("Amount is too large")


def validate_kind(kind: Union[TransactionKind, str]) -> TransactionKind:
    try:
        return TransactionKind(kind)
    except ValueError:
        raise ValidationError(f"Unknown transaction type '{kind}'")


def validate_category(category: Optional[str]) -> str:
    if category not in CATEGORIES:
        raise ValidationError(errors.unknown_category(category or ""))
    return category


class TransactionService:
    """Service for recording transactions and keeping the balance in step.

    Every create, edit and delete writes the transaction and the reconciled
    balance in a single unit of work.
    """

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db
        self.balances = BalanceService(db)

    def create_transaction(
        self,
        session: Session,
        amount: Decimal,
        kind: Union[TransactionKind, str],
        category: str,
        description: str = "",
        occurred_at: Optional[datetime] = None,
    ) -> Transaction:
        """Record a transaction and apply it to the balance.

        Args:
            session: Signed-in owner
            amount: Non-negative amount
            kind: Income or expense
            category: One of the fixed categories
            description: Optional free text
            occurred_at: When the transaction happened (defaults to now)

        Returns:
            The created transaction

        Raises:
            ValidationError: If any field is invalid
        """
        amount = validate_amount(amount)
        kind = validate_kind(kind)
        category = validate_category(category)
        occurred_at = utcnow() if occurred_at is None else normalize_instant(occurred_at)

        with self.db.atomic():
            balance = self.balances.get_current(session)
            transaction_id = self.db.create_transaction(
                owner_id=session.user_id,
                amount=amount,
                kind=kind,
                category=category,
                description=(description or "").strip(),
                occurred_at=occurred_at,
            )
            created = self.db.get_transaction(transaction_id)
            self.db.set_balance(session.user_id, reconcile_create(balance, created))

        logger.info(
            "Created %s transaction %s for owner %s", kind.value, transaction_id, session.user_id
        )
        return created

    def get_transaction(self, session: Session, transaction_id: int) -> Optional[Transaction]:
        """Get one of the owner's transactions by ID.

        Returns:
            Transaction entity or None if not found or owned by someone else
        """
        txn = self.db.get_transaction(transaction_id)
        if txn is None or txn.owner_id != session.user_id:
            return None
        return txn

    def require_transaction(self, session: Session, transaction_id: int) -> Transaction:
        """Get an owned transaction or raise NotFoundError."""
        txn = self.get_transaction(session, transaction_id)
        if txn is None:
            raise NotFoundError(errors.transaction_not_found(transaction_id))
        return txn

    def update_transaction(
        self,
        session: Session,
        transaction_id: int,
        amount: Optional[Decimal] = None,
        kind: Optional[Union[TransactionKind, str]] = None,
        category: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Transaction:
        """Edit a transaction and apply the difference to the balance.

        Only the provided fields change; the transaction date never does.

        Raises:
            NotFoundError: If the transaction does not exist for this owner
            ValidationError: If a new value is invalid
        """
        before = self.require_transaction(session, transaction_id)
        after = replace(
            before,
            amount=validate_amount(amount) if amount is not None else before.amount,
            kind=validate_kind(kind) if kind is not None else before.kind,
            category=validate_category(category) if category is not None else before.category,
            description=description.strip() if description is not None else before.description,
        )

        with self.db.atomic():
            balance = self.balances.get_current(session)
            self.db.update_transaction(
                transaction_id,
                amount=after.amount,
                kind=after.kind,
                category=after.category,
                description=after.description,
            )
            self.db.set_balance(session.user_id, reconcile_edit(balance, before, after))

        logger.info("Updated transaction %s for owner %s", transaction_id, session.user_id)
        return self.db.get_transaction(transaction_id)

    def delete_transaction(self, session: Session, transaction_id: int) -> Transaction:
        """Delete a transaction and reverse its effect on the balance.

        Returns:
            The deleted transaction

        Raises:
            NotFoundError: If the transaction does not exist for this owner
        """
        before = self.require_transaction(session, transaction_id)

        with self.db.atomic():
            balance = self.balances.get_current(session)
            self.db.delete_transaction(transaction_id)
            self.db.set_balance(session.user_id, reconcile_delete(balance, before))

        logger.info("Deleted transaction %s for owner %s", transaction_id, session.user_id)
        return before

    def list_transactions(
        self,
        session: Session,
        kind: Optional[Union[TransactionKind, str]] = None,
        category: Optional[str] = None,
    ) -> list[Transaction]:
        """List the owner's transactions newest first, with optional filters."""
        transactions = self.db.list_transactions(session.user_id)
        if kind is not None:
            kind = validate_kind(kind)
            transactions = [txn for txn in transactions if txn.kind == kind]
        if category is not None:
            transactions = [txn for txn in transactions if txn.category == category]
        return sort_by_recent(transactions)
