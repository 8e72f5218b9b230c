"""Live ledger view built on the storage change feeds."""

import logging
from datetime import datetime, tzinfo
from decimal import Decimal
from typing import Callable, Optional

from saldo.database.base import Database
from saldo.database.subscriptions import Subscription
from saldo.domain import analytics
from saldo.domain.entities import (
    Balance,
    ChartKind,
    DashboardStats,
    PeriodSummary,
    Session,
    TimeRange,
    Transaction,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


class LedgerFeed:
    """Keep the latest transactions and balance of one owner in memory.

    Open it (or use it as a context manager) to subscribe; every storage
    change replaces the cached snapshot and fires the ``on_change``
    callbacks. Chart data is recomputed from the cached snapshot on demand.
    """

    def __init__(self, db: Database, session: Session):
        self.db = db
        self.session = session
        self.transactions: list[Transaction] = []
        self.balance: Optional[Balance] = None
        self._callbacks: list[Callable[["LedgerFeed"], None]] = []
        self._subscriptions: list[Subscription] = []

    @property
    def is_open(self) -> bool:
        return bool(self._subscriptions)

    @property
    def current_balance(self) -> Decimal:
        return self.balance.current if self.balance is not None else ZERO

    def on_change(self, callback: Callable[["LedgerFeed"], None]) -> None:
        """Call ``callback(feed)`` after every snapshot update."""
        self._callbacks.append(callback)

    def open(self) -> "LedgerFeed":
        if not self.is_open:
            owner_id = self.session.user_id
            self._subscriptions = [
                self.db.subscribe_transactions(owner_id, self._receive_transactions),
                self.db.subscribe_balance(owner_id, self._receive_balance),
            ]
            logger.debug("Opened ledger feed for owner %s", owner_id)
        return self

    def close(self) -> None:
        for subscription in self._subscriptions:
            subscription.unsubscribe()
        self._subscriptions = []

    def __enter__(self) -> "LedgerFeed":
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _receive_transactions(self, transactions: list[Transaction]) -> None:
        self.transactions = analytics.sort_by_recent(transactions)
        self._fire()

    def _receive_balance(self, balance: Optional[Balance]) -> None:
        self.balance = balance
        self._fire()

    def _fire(self) -> None:
        for callback in list(self._callbacks):
            callback(self)

    # Derived views
    def chart(
        self,
        time_range: TimeRange,
        chart_kind: ChartKind,
        now: Optional[datetime] = None,
        tz: Optional[tzinfo] = None,
    ) -> list[analytics.ChartPoint]:
        return analytics.aggregate(self.transactions, time_range, chart_kind, now=now, tz=tz)

    def summary(self, time_range: TimeRange, now: Optional[datetime] = None) -> PeriodSummary:
        return analytics.summarize(self.transactions, time_range, now=now)

    def stats(self, now: Optional[datetime] = None) -> DashboardStats:
        return analytics.dashboard_stats(self.transactions, now=now, balance=self.current_balance)

    def recent(self, limit: int = 5) -> list[Transaction]:
        return self.transactions[:limit]
