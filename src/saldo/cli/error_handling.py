"""CLI error handling helpers."""

import logging

import click

from saldo.domain.errors import DomainError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def handle_storage_error(ctx: click.Context, action: str, error: Exception) -> None:
    """Log a storage failure and show a generic message."""
    logger.exception("Storage failure while trying to %s: %s", action, error)
    click.echo(f"Error: Failed to {action}. Please try again.", err=True)
    ctx.exit(1)
