"""Shared pytest fixtures for saldo tests."""

import tempfile
import os
from datetime import datetime, UTC
from decimal import Decimal
from itertools import count
import pytest

from saldo.database.factories import create_sqlite_database
from saldo.domain.auth import AuthService
from saldo.domain.balance import BalanceService
from saldo.domain.entities import Transaction, TransactionKind
from saldo.domain.transaction import TransactionService

# Fixed reference instant for analytics tests
NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def auth_service(temp_db):
    """Create an AuthService with a temporary database."""
    return AuthService(temp_db)


@pytest.fixture
def balance_service(temp_db):
    """Create a BalanceService with a temporary database."""
    return BalanceService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def sample_session(auth_service):
    """Register a user and return the signed-in session."""
    return auth_service.register(
        username="budi",
        email="budi@example.com",
        password="secret123",
        confirm_password="secret123",
    )


@pytest.fixture
def other_session(auth_service):
    """A second, unrelated user."""
    return auth_service.register(
        username="sari",
        email="sari@example.com",
        password="secret456",
        confirm_password="secret456",
    )


@pytest.fixture
def make_transaction():
    """Factory for in-memory Transaction entities."""
    ids = count(1)

    def factory(
        amount,
        kind=TransactionKind.EXPENSE,
        category="Food",
        occurred_at=NOW,
        description="",
        owner_id="owner-1",
    ):
        return Transaction(
            id=next(ids),
            owner_id=owner_id,
            amount=Decimal(str(amount)),
            kind=TransactionKind(kind),
            category=category,
            description=description,
            occurred_at=occurred_at,
        )

    return factory


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def session_file(tmp_path):
    """Path for the CLI session file."""
    return tmp_path / "session.json"


@pytest.fixture
def cli_base_args(temp_db, session_file):
    """Global CLI options pointing at the temporary database and session file."""
    return ["--db-path", temp_db.database_path, "--session-file", str(session_file)]
