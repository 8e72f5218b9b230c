"""Client-side aggregation of transactions into chart-ready shapes.

Everything in this module is a pure function of its inputs: the caller
supplies the transaction snapshot and, for reproducible output, the ``now``
reference instant and the zone used for calendar-day grouping.
"""

from collections import defaultdict
from datetime import date, datetime, timedelta, tzinfo
from decimal import Decimal
from typing import Iterable, Optional, Sequence, Union

from dateutil.relativedelta import relativedelta

from saldo.domain.entities import (
    CategoryTotal,
    ChartKind,
    ComparisonPoint,
    DashboardStats,
    OverviewPoint,
    PeriodSummary,
    TimeRange,
    Transaction,
    TransactionKind,
    TrendPoint,
)
from saldo.utils.timestamps import normalize_instant, utcnow

ZERO = Decimal("0")

LOOKBACK_DAYS: dict[TimeRange, int] = {
    TimeRange.WEEK: 7,
    TimeRange.MONTH: 30,
    # Fixed lookback, not aligned to the calendar year
    TimeRange.YEAR: 365,
}

TREND_MONTHS = 12
COMPARISON_CATEGORY_LIMIT = 5
TOP_CATEGORY_LIMIT = 5

DAY_LABEL = "%b %d"
PERIOD_DAY_LABEL = "%d %b"
MONTH_LABEL = "%b %Y"

ChartPoint = Union[OverviewPoint, CategoryTotal, TrendPoint, ComparisonPoint]


def get_cutoff(time_range: TimeRange, now: datetime) -> datetime:
    """Return the earliest instant included by a time range."""
    return now - timedelta(days=LOOKBACK_DAYS[TimeRange(time_range)])


def filter_by_window(
    transactions: Iterable[Transaction], cutoff: datetime, now: datetime
) -> list[Transaction]:
    """Keep transactions with ``cutoff <= occurred_at <= now``."""
    return [txn for txn in transactions if cutoff <= txn.occurred_at <= now]


def local_day(instant: datetime, tz: Optional[tzinfo] = None) -> date:
    """Calendar day of an instant in ``tz`` (system local zone when None)."""
    return instant.astimezone(tz).date()


def month_floor(value: date) -> date:
    return value.replace(day=1)


def each_day(start: date, end: date) -> list[date]:
    """All calendar days from start to end, inclusive."""
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


def each_month(start: date, end: date) -> list[date]:
    """First day of every month from start's month to end's month, inclusive."""
    months = []
    current = month_floor(start)
    last = month_floor(end)
    while current <= last:
        months.append(current)
        current = current + relativedelta(months=1)
    return months


def sum_amounts(transactions: Iterable[Transaction], kind: TransactionKind) -> Decimal:
    return sum((txn.amount for txn in transactions if txn.kind == kind), ZERO)


def sort_by_recent(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Sort transactions newest first for display lists."""
    return sorted(transactions, key=lambda txn: txn.occurred_at, reverse=True)


def aggregate(
    transactions: Sequence[Transaction],
    time_range: TimeRange,
    chart_kind: ChartKind,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> list[ChartPoint]:
    """Project a transaction snapshot into points for one chart.

    Args:
        transactions: Owner's transactions, in any order
        time_range: Lookback window applied before chart-specific logic
        chart_kind: Which projection to build
        now: Reference instant (defaults to the current time)
        tz: Zone for calendar grouping (defaults to system local)

    Returns:
        List of chart points; empty when there are no transactions
    """
    if not transactions:
        return []

    now = utcnow() if now is None else normalize_instant(now)
    time_range = TimeRange(time_range)
    chart_kind = ChartKind(chart_kind)
    cutoff = get_cutoff(time_range, now)
    filtered = filter_by_window(transactions, cutoff, now)

    if chart_kind == ChartKind.OVERVIEW:
        return build_overview(filtered, cutoff, now, tz)
    if chart_kind == ChartKind.CATEGORIES:
        return category_totals(filtered)
    if chart_kind == ChartKind.TRENDS:
        return build_trends(filtered, now, tz)
    return build_comparison(filtered, time_range, cutoff, now, tz)


def build_overview(
    transactions: Sequence[Transaction],
    cutoff: datetime,
    now: datetime,
    tz: Optional[tzinfo] = None,
) -> list[OverviewPoint]:
    """One point per calendar day from cutoff to now, zero-filled."""
    income_by_day: dict[date, Decimal] = defaultdict(lambda: ZERO)
    expense_by_day: dict[date, Decimal] = defaultdict(lambda: ZERO)

    for txn in transactions:
        day = local_day(txn.occurred_at, tz)
        if txn.kind == TransactionKind.INCOME:
            income_by_day[day] += txn.amount
        else:
            expense_by_day[day] += txn.amount

    points = []
    for day in each_day(local_day(cutoff, tz), local_day(now, tz)):
        income = income_by_day.get(day, ZERO)
        expense = expense_by_day.get(day, ZERO)
        points.append(
            OverviewPoint(
                day=day,
                label=day.strftime(DAY_LABEL),
                income=income,
                expense=expense,
                net=income - expense,
            )
        )
    return points


def category_totals(
    transactions: Iterable[Transaction], limit: Optional[int] = None
) -> list[CategoryTotal]:
    """Sum expenses per category, largest first.

    Args:
        transactions: Transactions to total (income is ignored)
        limit: Optional maximum number of categories to return
    """
    totals: dict[str, Decimal] = {}
    for txn in transactions:
        if txn.kind != TransactionKind.EXPENSE:
            continue
        totals[txn.category] = totals.get(txn.category, ZERO) + txn.amount

    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    if limit is not None:
        ranked = ranked[:limit]
    return [CategoryTotal(category=name, total=total) for name, total in ranked]


def build_trends(
    transactions: Sequence[Transaction],
    now: datetime,
    tz: Optional[tzinfo] = None,
) -> list[TrendPoint]:
    """Monthly totals over the trailing twelve calendar months.

    The month window is always twelve months ending with the current one,
    whatever cutoff produced ``transactions``.
    """
    current_month = month_floor(local_day(now, tz))
    months = each_month(current_month - relativedelta(months=TREND_MONTHS - 1), current_month)

    by_month: dict[date, list[Transaction]] = defaultdict(list)
    for txn in transactions:
        by_month[month_floor(local_day(txn.occurred_at, tz))].append(txn)

    points = []
    for month in months:
        month_txns = by_month.get(month, [])
        income = sum_amounts(month_txns, TransactionKind.INCOME)
        expense = sum_amounts(month_txns, TransactionKind.EXPENSE)
        ratio = expense / income * 100 if income > 0 else ZERO
        points.append(
            TrendPoint(
                month=month,
                label=month.strftime(MONTH_LABEL),
                income=income,
                expense=expense,
                ratio=ratio,
            )
        )
    return points


def first_categories(
    transactions: Iterable[Transaction], limit: int = COMPARISON_CATEGORY_LIMIT
) -> list[str]:
    """Distinct expense categories in order of first appearance."""
    categories: list[str] = []
    for txn in transactions:
        if txn.kind != TransactionKind.EXPENSE or txn.category in categories:
            continue
        categories.append(txn.category)
        if len(categories) == limit:
            break
    return categories


def build_comparison(
    transactions: Sequence[Transaction],
    time_range: TimeRange,
    cutoff: datetime,
    now: datetime,
    tz: Optional[tzinfo] = None,
) -> list[ComparisonPoint]:
    """Per-period expense totals for up to five categories.

    Periods are days for the weekly range and months otherwise.
    """
    categories = first_categories(transactions)
    daily = time_range == TimeRange.WEEK

    def period_of(instant: datetime) -> date:
        day = local_day(instant, tz)
        return day if daily else month_floor(day)

    if daily:
        periods = each_day(local_day(cutoff, tz), local_day(now, tz))
        label_format = PERIOD_DAY_LABEL
    else:
        periods = each_month(local_day(cutoff, tz), local_day(now, tz))
        label_format = MONTH_LABEL

    sums: dict[tuple[date, str], Decimal] = defaultdict(lambda: ZERO)
    for txn in transactions:
        if txn.kind == TransactionKind.EXPENSE and txn.category in categories:
            sums[(period_of(txn.occurred_at), txn.category)] += txn.amount

    return [
        ComparisonPoint(
            period=period,
            label=period.strftime(label_format),
            totals={category: sums.get((period, category), ZERO) for category in categories},
        )
        for period in periods
    ]


def summarize(
    transactions: Sequence[Transaction],
    time_range: TimeRange,
    now: Optional[datetime] = None,
) -> PeriodSummary:
    """Headline totals for the charts view."""
    now = utcnow() if now is None else normalize_instant(now)
    time_range = TimeRange(time_range)
    filtered = filter_by_window(transactions, get_cutoff(time_range, now), now)

    total_income = sum_amounts(filtered, TransactionKind.INCOME)
    total_expense = sum_amounts(filtered, TransactionKind.EXPENSE)
    return PeriodSummary(
        time_range=time_range,
        total_income=total_income,
        total_expense=total_expense,
        net_savings=total_income - total_expense,
        top_categories=tuple(category_totals(filtered, limit=TOP_CATEGORY_LIMIT)),
        transaction_count=len(filtered),
    )


def dashboard_categories(
    transactions: Sequence[Transaction],
    now: Optional[datetime] = None,
    limit: int = TOP_CATEGORY_LIMIT,
) -> list[CategoryTotal]:
    """Top expense categories over the last week, capped at ``limit``."""
    now = utcnow() if now is None else normalize_instant(now)
    weekly = filter_by_window(transactions, get_cutoff(TimeRange.WEEK, now), now)
    return category_totals(weekly, limit=limit)


def dashboard_stats(
    transactions: Sequence[Transaction],
    now: Optional[datetime] = None,
    balance: Optional[Decimal] = None,
) -> DashboardStats:
    """Quick stats: weekly spend, 30-day spend and income, record count."""
    now = utcnow() if now is None else normalize_instant(now)
    weekly = filter_by_window(transactions, get_cutoff(TimeRange.WEEK, now), now)
    monthly = filter_by_window(transactions, get_cutoff(TimeRange.MONTH, now), now)

    return DashboardStats(
        weekly_expense=sum_amounts(weekly, TransactionKind.EXPENSE),
        monthly_expense=sum_amounts(monthly, TransactionKind.EXPENSE),
        monthly_income=sum_amounts(monthly, TransactionKind.INCOME),
        transaction_count=len(transactions),
        top_categories=tuple(dashboard_categories(transactions, now)),
        balance=balance,
    )
