"""Domain model entities for saldo.

These are pure data classes representing business concepts, independent of
the storage schema. Chart points are plain values too, so the analytics code
can stay free of any storage or presentation concern.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


CATEGORIES: tuple[str, ...] = (
    "Food",
    "Transport",
    "Groceries",
    "Entertainment",
    "Necessities",
    "Other",
)


class TransactionKind(str, Enum):
    """Direction of a transaction's effect on the balance."""

    EXPENSE = "expense"
    INCOME = "income"


class TimeRange(str, Enum):
    """Lookback window used by the analytics views."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class ChartKind(str, Enum):
    """Chart projections produced by the aggregator."""

    OVERVIEW = "overview"
    CATEGORIES = "categories"
    TRENDS = "trends"
    COMPARISON = "comparison"


@dataclass(frozen=True)
class User:
    """Registered user profile."""

    uid: str
    email: str
    username: str
    created_at: datetime


@dataclass(frozen=True)
class Session:
    """Authenticated identity passed to every owner-scoped operation."""

    user_id: str
    email: str
    username: str


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    ``amount`` is always a non-negative magnitude; ``kind`` decides whether it
    adds to or subtracts from the balance.
    """

    id: int
    owner_id: str
    amount: Decimal
    kind: TransactionKind
    category: str
    description: str
    occurred_at: datetime


@dataclass(frozen=True)
class Balance:
    """Running balance of one owner."""

    owner_id: str
    current: Decimal
    last_updated: datetime


@dataclass(frozen=True)
class OverviewPoint:
    """Income and expense totals for a single day."""

    day: date
    label: str
    income: Decimal
    expense: Decimal
    net: Decimal


@dataclass(frozen=True)
class CategoryTotal:
    """Total expense for one category."""

    category: str
    total: Decimal


@dataclass(frozen=True)
class TrendPoint:
    """Monthly income/expense totals with expense-to-income ratio (percent)."""

    month: date
    label: str
    income: Decimal
    expense: Decimal
    ratio: Decimal


@dataclass(frozen=True)
class ComparisonPoint:
    """Per-category expense totals for one period (day or month)."""

    period: date
    label: str
    totals: dict[str, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class PeriodSummary:
    """Headline numbers for the charts view."""

    time_range: TimeRange
    total_income: Decimal
    total_expense: Decimal
    net_savings: Decimal
    top_categories: tuple[CategoryTotal, ...]
    transaction_count: int


@dataclass(frozen=True)
class DashboardStats:
    """Quick stats shown on the dashboard."""

    weekly_expense: Decimal
    monthly_expense: Decimal
    monthly_income: Decimal
    transaction_count: int
    top_categories: tuple[CategoryTotal, ...] = ()
    balance: Optional[Decimal] = None
