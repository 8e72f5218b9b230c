"""Balance management commands."""

import click
from sqlalchemy.exc import SQLAlchemyError

from saldo.cli.error_handling import handle_domain_error, handle_storage_error
from saldo.cli.session_resolution import require_session_or_exit
from saldo.domain.balance import BalanceService
from saldo.domain.errors import DomainError
from saldo.utils.amount_parser import parse_amount
from saldo.utils.currency import format_currency


@click.group("balance", invoke_without_command=True)
@click.pass_context
def balance_group(ctx):
    """Show or adjust the running balance."""
    if ctx.invoked_subcommand is None:
        session = require_session_or_exit(ctx)
        try:
            current = BalanceService(ctx.obj["db"]).get_current(session)
        except SQLAlchemyError as e:
            handle_storage_error(ctx, "load balance", e)
        click.echo(f"Current balance: {format_currency(current)}")


def _adjust(ctx, amount: str, action: str) -> None:
    session = require_session_or_exit(ctx)
    service = BalanceService(ctx.obj["db"])

    try:
        value = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount: {e}", err=True)
        ctx.exit(1)

    try:
        if action == "top-up":
            new_balance = service.top_up(session, value)
        else:
            new_balance = service.deduct(session, value)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except SQLAlchemyError as e:
        handle_storage_error(ctx, "update balance", e)

    click.echo(f"Current balance: {format_currency(new_balance)}")


@balance_group.command("top-up")
@click.argument("amount")
@click.pass_context
def top_up(ctx, amount: str):
    """Add money to the balance without recording a transaction."""
    _adjust(ctx, amount, "top-up")


@balance_group.command("deduct")
@click.argument("amount")
@click.pass_context
def deduct(ctx, amount: str):
    """Take money off the balance without recording a transaction."""
    _adjust(ctx, amount, "deduct")


@balance_group.command("reset")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def reset(ctx, yes: bool):
    """Reset the balance to zero."""
    session = require_session_or_exit(ctx)
    if not yes and not click.confirm("Are you sure you want to reset the balance to 0?"):
        click.echo("Cancelled.")
        return

    try:
        BalanceService(ctx.obj["db"]).reset(session)
    except SQLAlchemyError as e:
        handle_storage_error(ctx, "reset balance", e)

    click.echo(f"Current balance: {format_currency(0)}")


def register_commands(cli):
    """Register balance commands with main CLI."""
    cli.add_command(balance_group)
