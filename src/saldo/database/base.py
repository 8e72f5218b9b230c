"""Abstract database interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

# Import entities directly to avoid circular import through domain/__init__.py
from saldo.domain.entities import Balance, Transaction, TransactionKind, User
from saldo.database.subscriptions import Subscription


class Database(ABC):
    """Abstract storage collaborator for saldo.

    Every transaction and balance operation is scoped to an owner ID.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Group writes into one unit of work.

        Writes inside the block are committed together on normal exit and
        rolled back if the block raises. Change notifications are delivered
        only after the commit.
        """
        pass

    # User operations
    @abstractmethod
    def create_user(self, email: str, username: str, password_hash: str) -> str:
        """Create a user. Returns the generated user ID."""
        pass

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by email address."""
        pass

    @abstractmethod
    def get_password_hash(self, user_id: str) -> Optional[str]:
        """Get the stored password hash for a user."""
        pass

    # Balance operations
    @abstractmethod
    def get_balance(self, owner_id: str) -> Optional[Balance]:
        """Get an owner's balance, or None if it was never written."""
        pass

    @abstractmethod
    def set_balance(self, owner_id: str, value: Decimal) -> None:
        """Create or replace an owner's balance."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        owner_id: str,
        amount: Decimal,
        kind: TransactionKind,
        category: str,
        description: str,
        occurred_at: datetime,
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def update_transaction(
        self,
        transaction_id: int,
        amount: Optional[Decimal] = None,
        kind: Optional[TransactionKind] = None,
        category: Optional[str] = None,
        description: Optional[str] = None,
    ) -> None:
        """Update the editable fields of a transaction.

        ``occurred_at`` is not editable.
        """
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction."""
        pass

    @abstractmethod
    def list_transactions(self, owner_id: str) -> list[Transaction]:
        """List an owner's transactions, newest first."""
        pass

    # Change feeds
    @abstractmethod
    def subscribe_transactions(
        self, owner_id: str, callback: Callable[[list[Transaction]], None]
    ) -> Subscription:
        """Receive the owner's full transaction list now and after every change."""
        pass

    @abstractmethod
    def subscribe_balance(
        self, owner_id: str, callback: Callable[[Optional[Balance]], None]
    ) -> Subscription:
        """Receive the owner's balance now and after every change."""
        pass
