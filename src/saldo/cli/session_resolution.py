"""CLI helpers for session resolution."""

from __future__ import annotations

import click
from sqlalchemy.exc import SQLAlchemyError

from saldo.cli.error_handling import handle_domain_error, handle_storage_error
from saldo.cli.session_store import load_session
from saldo.domain.auth import AuthService
from saldo.domain.entities import Session
from saldo.domain.errors import AuthenticationError


def require_session_or_exit(ctx: click.Context) -> Session:
    """Load the signed-in session, or exit with a CLI error.

    The stored session is checked against the user store so a session left
    behind by a different database is rejected.
    """
    settings = ctx.obj["settings"]
    session = load_session(settings.session_path)
    try:
        AuthService(ctx.obj["db"]).resolve(session)
    except AuthenticationError as exc:
        handle_domain_error(ctx, exc)
    except SQLAlchemyError as exc:
        handle_storage_error(ctx, "load session", exc)
    return session
