"""Transaction history command."""

import click
from sqlalchemy.exc import SQLAlchemyError

from saldo.cli.commands.add import KIND_CHOICES
from saldo.cli.error_handling import handle_storage_error
from saldo.cli.rendering import echo_transactions
from saldo.cli.session_resolution import require_session_or_exit
from saldo.domain.entities import CATEGORIES
from saldo.domain.transaction import TransactionService


@click.command("history")
@click.option("--type", "kind", type=click.Choice(KIND_CHOICES, case_sensitive=False), help="Only this type")
@click.option("--category", type=click.Choice(CATEGORIES, case_sensitive=False), help="Only this category")
@click.option("--limit", type=int, help="Show at most this many transactions")
@click.pass_context
def history(ctx, kind: str | None, category: str | None, limit: int | None):
    """List transactions, newest first."""
    session = require_session_or_exit(ctx)
    service = TransactionService(ctx.obj["db"])

    try:
        transactions = service.list_transactions(session, kind=kind, category=category)
    except SQLAlchemyError as e:
        handle_storage_error(ctx, "load transactions", e)
    if limit is not None:
        transactions = transactions[:limit]

    if transactions:
        click.echo(f"\nFound {len(transactions)} transaction(s):")
    echo_transactions(transactions)


def register_commands(cli):
    """Register history command with main CLI."""
    cli.add_command(history)
