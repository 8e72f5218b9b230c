"""Analytics chart command."""

import click
from sqlalchemy.exc import SQLAlchemyError

from saldo.cli.error_handling import handle_storage_error
from saldo.cli.rendering import echo_chart, echo_summary
from saldo.cli.session_resolution import require_session_or_exit
from saldo.domain.entities import ChartKind, TimeRange
from saldo.domain.feed import LedgerFeed

CHART_TITLES = {
    ChartKind.OVERVIEW: "Income vs expenses per day",
    ChartKind.CATEGORIES: "Expenses by category",
    ChartKind.TRENDS: "Monthly trends (last 12 months)",
    ChartKind.COMPARISON: "Category comparison over time",
}


@click.command("charts")
@click.option(
    "--range",
    "time_range",
    type=click.Choice([r.value for r in TimeRange], case_sensitive=False),
    default=TimeRange.MONTH.value,
    show_default=True,
    help="Lookback window: week (7 days), month (30 days) or year (365 days)",
)
@click.option(
    "--chart",
    "chart_kind",
    type=click.Choice([k.value for k in ChartKind], case_sensitive=False),
    default=ChartKind.OVERVIEW.value,
    show_default=True,
    help="Chart to show",
)
@click.option("--no-summary", is_flag=True, help="Hide the summary block")
@click.pass_context
def charts(ctx, time_range: str, chart_kind: str, no_summary: bool):
    """Show aggregated chart data.

    Examples:
        saldo charts --range week --chart categories
        saldo charts --chart trends
    """
    session = require_session_or_exit(ctx)
    time_range = TimeRange(time_range)
    chart_kind = ChartKind(chart_kind)

    try:
        with LedgerFeed(ctx.obj["db"], session) as feed:
            summary = feed.summary(time_range)
            points = feed.chart(time_range, chart_kind)
    except SQLAlchemyError as e:
        handle_storage_error(ctx, "load chart data", e)

    if not no_summary:
        echo_summary(summary)
        click.echo()
    click.echo(f"{CHART_TITLES[chart_kind]}:")
    echo_chart(chart_kind, points)


def register_commands(cli):
    """Register charts command with main CLI."""
    cli.add_command(charts)
