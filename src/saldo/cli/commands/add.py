"""Add transaction command."""

import click
from sqlalchemy.exc import SQLAlchemyError

from saldo.cli.error_handling import handle_domain_error, handle_storage_error
from saldo.cli.rendering import echo_transaction_detail
from saldo.cli.session_resolution import require_session_or_exit
from saldo.domain.balance import BalanceService
from saldo.domain.entities import CATEGORIES, TransactionKind
from saldo.domain.errors import DomainError
from saldo.domain.transaction import TransactionService
from saldo.utils.amount_parser import parse_amount
from saldo.utils.currency import format_currency
from saldo.utils.date_parser import parse_datetime

KIND_CHOICES = [kind.value for kind in TransactionKind]


@click.command("add")
@click.option("--amount", required=True, help="Transaction amount (e.g., 50000 or Rp50,000)")
@click.option(
    "--type",
    "kind",
    type=click.Choice(KIND_CHOICES, case_sensitive=False),
    default=TransactionKind.EXPENSE.value,
    show_default=True,
    help="Transaction type",
)
@click.option(
    "--category",
    required=True,
    type=click.Choice(CATEGORIES, case_sensitive=False),
    help="Category",
)
@click.option("--description", default="", help="Transaction description")
@click.option(
    "--date",
    help="When it happened (YYYY-MM-DD [HH:MM] or relative like 'yesterday'); defaults to now",
)
@click.pass_context
def add_transaction(
    ctx,
    amount: str,
    kind: str,
    category: str,
    description: str,
    date: str | None,
):
    """Record an income or expense and update the balance.

    Examples:
        saldo add --amount 25000 --category Food --description "Lunch"
        saldo add --amount 5000000 --type income --category Other --description "Salary"
    """
    db = ctx.obj["db"]
    session = require_session_or_exit(ctx)
    transaction_service = TransactionService(db)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount: {e}", err=True)
        ctx.exit(1)

    occurred_at = None
    if date:
        try:
            occurred_at = parse_datetime(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        txn = transaction_service.create_transaction(
            session,
            amount=txn_amount,
            kind=kind,
            category=category,
            description=description,
            occurred_at=occurred_at,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    except SQLAlchemyError as e:
        handle_storage_error(ctx, "save transaction", e)

    click.echo(f"Created transaction {txn.id}")
    echo_transaction_detail(txn)
    echo_balance(ctx, db, session)


def echo_balance(ctx, db, session) -> None:
    """Print the balance after a write."""
    try:
        balance = BalanceService(db).get_current(session)
    except SQLAlchemyError as e:
        handle_storage_error(ctx, "load balance", e)
    click.echo(f"Balance: {format_currency(balance)}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
