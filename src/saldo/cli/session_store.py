"""Persist the signed-in session between CLI invocations."""

import json
import logging
from pathlib import Path
from typing import Optional

from saldo.domain.entities import Session

logger = logging.getLogger(__name__)


def load_session(path: Path) -> Optional[Session]:
    """Read the stored session, or None if there is none or it is unreadable."""
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return Session(
            user_id=str(data["user_id"]),
            email=str(data["email"]),
            username=str(data["username"]),
        )
    except (OSError, ValueError, KeyError, TypeError) as e:
        logger.warning("Ignoring unreadable session file %s: %s", path, e)
        return None


def save_session(path: Path, session: Session) -> None:
    """Write the session file, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "user_id": session.user_id,
        "email": session.email,
        "username": session.username,
    }
    path.write_text(json.dumps(payload), encoding="utf-8")


def clear_session(path: Path) -> bool:
    """Remove the session file. Returns True if one was removed."""
    if path.exists():
        path.unlink()
        return True
    return False
