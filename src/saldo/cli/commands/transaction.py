"""Transaction management commands."""

import click
from sqlalchemy.exc import SQLAlchemyError

from saldo.cli.commands.add import KIND_CHOICES, echo_balance
from saldo.cli.error_handling import handle_domain_error, handle_storage_error
from saldo.cli.rendering import echo_transaction_detail
from saldo.cli.session_resolution import require_session_or_exit
from saldo.domain.entities import CATEGORIES
from saldo.domain.errors import DomainError
from saldo.domain.transaction import TransactionService
from saldo.utils.amount_parser import parse_amount


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("edit")
@click.argument("transaction_id", type=int)
@click.option("--amount", help="New amount")
@click.option("--type", "kind", type=click.Choice(KIND_CHOICES, case_sensitive=False), help="New type")
@click.option("--category", type=click.Choice(CATEGORIES, case_sensitive=False), help="New category")
@click.option("--description", help="New description")
@click.pass_context
def edit_transaction(
    ctx,
    transaction_id: int,
    amount: str | None,
    kind: str | None,
    category: str | None,
    description: str | None,
) -> None:
    """Edit a transaction.

    Updates only the fields that are provided; the date is kept. The balance
    is adjusted by the difference between the old and new values.

    Examples:
        saldo transaction edit 3 --amount 30000
        saldo transaction edit 3 --type income --category Other
    """
    db = ctx.obj["db"]
    session = require_session_or_exit(ctx)
    service = TransactionService(db)

    if amount is None and kind is None and category is None and description is None:
        click.echo("Error: Nothing to update. Provide at least one option.", err=True)
        ctx.exit(1)

    new_amount = None
    if amount is not None:
        try:
            new_amount = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount: {e}", err=True)
            ctx.exit(1)

    try:
        txn = service.update_transaction(
            session,
            transaction_id,
            amount=new_amount,
            kind=kind,
            category=category,
            description=description,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    except SQLAlchemyError as e:
        handle_storage_error(ctx, "update transaction", e)

    click.echo(f"Updated transaction {txn.id}")
    echo_transaction_detail(txn)
    echo_balance(ctx, db, session)


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool) -> None:
    """Delete a transaction and reverse its effect on the balance."""
    db = ctx.obj["db"]
    session = require_session_or_exit(ctx)
    service = TransactionService(db)

    try:
        txn = service.require_transaction(session, transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except SQLAlchemyError as e:
        handle_storage_error(ctx, "load transaction", e)

    if not yes:
        click.echo(f"Transaction {txn.id}:")
        echo_transaction_detail(txn)
        if not click.confirm("Delete this transaction?"):
            click.echo("Cancelled.")
            return

    try:
        service.delete_transaction(session, transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except SQLAlchemyError as e:
        handle_storage_error(ctx, "delete transaction", e)

    click.echo(f"Deleted transaction {transaction_id}")
    echo_balance(ctx, db, session)


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
