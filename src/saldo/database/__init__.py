"""Database layer for saldo application."""

from saldo.database.base import Database
from saldo.database.factories import create_sqlite_database
from saldo.database.subscriptions import Subscription

__all__ = ["Database", "Subscription", "create_sqlite_database"]
