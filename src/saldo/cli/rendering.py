"""Plain-text rendering of transactions, stats and chart data."""

from datetime import tzinfo
from decimal import Decimal
from typing import Optional, Sequence

import click

from saldo.domain.entities import (
    CategoryTotal,
    ChartKind,
    ComparisonPoint,
    DashboardStats,
    OverviewPoint,
    PeriodSummary,
    Transaction,
    TransactionKind,
    TrendPoint,
)
from saldo.utils.currency import format_compact, format_currency

BAR_WIDTH = 30

KIND_LABELS = {
    TransactionKind.INCOME: "Income",
    TransactionKind.EXPENSE: "Expense",
}


def bar(value: Decimal, maximum: Decimal, width: int = BAR_WIDTH) -> str:
    if maximum <= 0 or value <= 0:
        return ""
    return "#" * max(1, int(value / maximum * width))


def echo_transactions(transactions: Sequence[Transaction], tz: Optional[tzinfo] = None) -> None:
    """Print transactions as a table."""
    if not transactions:
        click.echo("No transactions yet.")
        return

    click.echo("-" * 96)
    click.echo(
        f"{'ID':<6} {'Date':<17} {'Type':<8} {'Category':<14} {'Amount':>16}  {'Description':<30}"
    )
    click.echo("-" * 96)
    for txn in transactions:
        when = txn.occurred_at.astimezone(tz).strftime("%Y-%m-%d %H:%M")
        amount_str = format_currency(txn.amount)
        if txn.kind == TransactionKind.EXPENSE:
            amount_str = f"-{amount_str}"
        click.echo(
            f"{txn.id:<6} {when:<17} {KIND_LABELS[txn.kind]:<8} {txn.category:<14} "
            f"{amount_str:>16}  {txn.description[:30]:<30}"
        )


def echo_transaction_detail(txn: Transaction, tz: Optional[tzinfo] = None) -> None:
    click.echo(f"  Date: {txn.occurred_at.astimezone(tz):%Y-%m-%d %H:%M}")
    click.echo(f"  Type: {KIND_LABELS[txn.kind]}")
    click.echo(f"  Category: {txn.category}")
    click.echo(f"  Amount: {format_currency(txn.amount)}")
    if txn.description:
        click.echo(f"  Description: {txn.description}")


def echo_category_bars(totals: Sequence[CategoryTotal]) -> None:
    if not totals:
        click.echo("No expense data yet.")
        return
    maximum = totals[0].total
    for item in totals:
        click.echo(
            f"  {item.category:<14} {format_currency(item.total):>16}  {bar(item.total, maximum)}"
        )


def echo_dashboard(username: str, stats: DashboardStats) -> None:
    click.echo(f"Welcome back, {username}!")
    click.echo()
    click.echo(f"  {'Current balance':<26} {format_currency(stats.balance or 0):>18}")
    click.echo(f"  {'Expenses this week':<26} {format_currency(stats.weekly_expense):>18}")
    click.echo(f"  {'Expenses last 30 days':<26} {format_currency(stats.monthly_expense):>18}")
    click.echo(f"  {'Income last 30 days':<26} {format_currency(stats.monthly_income):>18}")
    click.echo(f"  {'Total transactions':<26} {stats.transaction_count:>18}")
    click.echo()
    click.echo("Top expense categories (last 7 days):")
    echo_category_bars(stats.top_categories)


def echo_summary(summary: PeriodSummary) -> None:
    click.echo(f"Summary ({summary.time_range.value}):")
    click.echo(f"  {'Total income':<20} {format_currency(summary.total_income):>18}")
    click.echo(f"  {'Total expenses':<20} {format_currency(summary.total_expense):>18}")
    click.echo(f"  {'Net savings':<20} {format_currency(summary.net_savings):>18}")
    click.echo(f"  {'Transactions':<20} {summary.transaction_count:>18}")
    if summary.top_categories:
        click.echo("  Top categories:")
        for index, item in enumerate(summary.top_categories, start=1):
            click.echo(f"    {index}. {item.category:<14} {format_currency(item.total):>16}")


def echo_chart(chart_kind: ChartKind, points: Sequence) -> None:
    """Print chart points as a table for the given chart kind."""
    if not points:
        click.echo("No data for this period.")
        return

    if chart_kind == ChartKind.OVERVIEW:
        _echo_overview(points)
    elif chart_kind == ChartKind.CATEGORIES:
        echo_category_bars(points)
    elif chart_kind == ChartKind.TRENDS:
        _echo_trends(points)
    else:
        _echo_comparison(points)


def _echo_overview(points: Sequence[OverviewPoint]) -> None:
    click.echo(f"{'Day':<8} {'Income':>16} {'Expense':>16} {'Net':>16}")
    for point in points:
        click.echo(
            f"{point.label:<8} {format_currency(point.income):>16} "
            f"{format_currency(point.expense):>16} {format_currency(point.net):>16}"
        )


def _echo_trends(points: Sequence[TrendPoint]) -> None:
    click.echo(f"{'Month':<10} {'Income':>16} {'Expense':>16} {'Ratio':>8}")
    for point in points:
        click.echo(
            f"{point.label:<10} {format_currency(point.income):>16} "
            f"{format_currency(point.expense):>16} {point.ratio:>7.1f}%"
        )


def _echo_comparison(points: Sequence[ComparisonPoint]) -> None:
    categories = list(points[0].totals)
    if not categories:
        click.echo("No expense data for this period.")
        return
    header = f"{'Period':<10}" + "".join(f" {name[:12]:>12}" for name in categories)
    click.echo(header)
    for point in points:
        row = f"{point.label:<10}" + "".join(
            f" {format_compact(point.totals[name]):>12}" for name in categories
        )
        click.echo(row)
