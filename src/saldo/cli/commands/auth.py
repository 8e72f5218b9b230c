"""Registration and sign-in commands."""

import click
from sqlalchemy.exc import SQLAlchemyError

from saldo.cli.error_handling import handle_domain_error, handle_storage_error
from saldo.cli.session_resolution import require_session_or_exit
from saldo.cli.session_store import clear_session, save_session
from saldo.domain.auth import AuthService
from saldo.domain.errors import DomainError


@click.command("register")
@click.option("--username", prompt=True, help="Display name")
@click.option("--email", prompt=True, help="Email address used to sign in")
@click.option("--password", prompt=True, hide_input=True, help="Password (at least 6 characters)")
@click.option(
    "--confirm-password", prompt="Confirm password", hide_input=True, help="Repeat the password"
)
@click.pass_context
def register(ctx, username: str, email: str, password: str, confirm_password: str):
    """Create an account and sign in.

    Examples:
        saldo register --username budi --email budi@example.com
    """
    service = AuthService(ctx.obj["db"])
    try:
        session = service.register(username, email, password, confirm_password)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except SQLAlchemyError as e:
        handle_storage_error(ctx, "create account", e)

    save_session(ctx.obj["settings"].session_path, session)
    click.echo(f"Account created. Signed in as {session.username} ({session.email})")


@click.command("login")
@click.option("--email", prompt=True, help="Email address")
@click.option("--password", prompt=True, hide_input=True, help="Password")
@click.pass_context
def login(ctx, email: str, password: str):
    """Sign in."""
    service = AuthService(ctx.obj["db"])
    try:
        session = service.authenticate(email, password)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except SQLAlchemyError as e:
        handle_storage_error(ctx, "sign in", e)

    save_session(ctx.obj["settings"].session_path, session)
    click.echo(f"Signed in as {session.username} ({session.email})")


@click.command("logout")
@click.pass_context
def logout(ctx):
    """Sign out."""
    if clear_session(ctx.obj["settings"].session_path):
        click.echo("Signed out.")
    else:
        click.echo("Not signed in.")


@click.command("whoami")
@click.pass_context
def whoami(ctx):
    """Show the signed-in user."""
    session = require_session_or_exit(ctx)
    click.echo(f"{session.username} ({session.email})")


def register_commands(cli):
    """Register auth commands with main CLI."""
    cli.add_command(register)
    cli.add_command(login)
    cli.add_command(logout)
    cli.add_command(whoami)
