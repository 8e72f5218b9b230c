"""Dashboard command."""

import click
from sqlalchemy.exc import SQLAlchemyError

from saldo.cli.error_handling import handle_storage_error
from saldo.cli.rendering import echo_dashboard, echo_transactions
from saldo.cli.session_resolution import require_session_or_exit
from saldo.domain.balance import BalanceService
from saldo.domain.feed import LedgerFeed


@click.command("dashboard")
@click.option("--recent", type=int, default=5, show_default=True, help="Number of recent transactions")
@click.pass_context
def dashboard(ctx, recent: int):
    """Show balance, quick stats, top categories and recent transactions."""
    db = ctx.obj["db"]
    session = require_session_or_exit(ctx)

    try:
        # The balance row is created on first access
        BalanceService(db).get_balance(session)
        with LedgerFeed(db, session) as feed:
            stats = feed.stats()
            latest = feed.recent(recent)
    except SQLAlchemyError as e:
        handle_storage_error(ctx, "load dashboard", e)

    echo_dashboard(session.username, stats)
    click.echo()
    click.echo("Recent transactions:")
    echo_transactions(latest)


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(dashboard)
