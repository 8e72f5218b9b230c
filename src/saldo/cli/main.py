"""Main CLI entry point."""

import click

from saldo.config import DB_PATH_ENV, SESSION_PATH_ENV, Settings, configure_logging
from saldo.database.factories import create_sqlite_database

# Import and register all commands at module level
from saldo.cli.commands import (
    auth,
    add,
    transaction,
    history,
    balance,
    dashboard,
    charts,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENV} environment variable)",
    envvar=DB_PATH_ENV,
)
@click.option(
    "--session-file",
    type=click.Path(),
    help=f"Path to session file (overrides {SESSION_PATH_ENV} environment variable)",
    envvar=SESSION_PATH_ENV,
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, session_file: str | None, verbose: bool):
    """Saldo - personal finance tracker.

    Record income and expenses, keep a running balance and see where the
    money goes by day, month and category.
    """
    ctx.ensure_object(dict)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        settings = Settings.load(
            database_path=db_path,
            session_path=session_file,
            log_level="DEBUG" if verbose else None,
        )
        configure_logging(settings.log_level)

        db = create_sqlite_database(database_path=str(settings.database_path))
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)
        ctx.obj["settings"] = settings
        ctx.obj["db"] = db


# Register all commands
auth.register_commands(cli)
add.register_commands(cli)
transaction.register_commands(cli)
history.register_commands(cli)
balance.register_commands(cli)
dashboard.register_commands(cli)
charts.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
