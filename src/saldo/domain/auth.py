"""Authentication domain service."""

import logging
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from saldo.database.base import Database
from saldo.domain import errors
from saldo.domain.entities import Session, User
from saldo.domain.errors import AuthenticationError, ConflictError, ValidationError

logger = logging.getLogger(__name__)


def validate_registration(
    email: str, username: str, password: str, confirm_password: str
) -> None:
    """Check registration form input before anything is written.

    Raises:
        ValidationError: If a field is missing, the passwords differ, or the
            password is too short
    """
    if not email or not email.strip():
        raise ValidationError("Email is required")
    if not username or not username.strip():
        raise ValidationError("Username is required")
    if password != confirm_password:
        raise ValidationError(errors.passwords_do_not_match())
    if len(password) < errors.MIN_PASSWORD_LENGTH:
        raise ValidationError(errors.password_too_short())


class AuthService:
    """Service for creating identities and signing in."""

    def __init__(self, db: Database):
        """Initialize auth service.

        Args:
            db: Database instance
        """
        self.db = db

    def register(
        self, username: str, email: str, password: str, confirm_password: str
    ) -> Session:
        """Create an identity and its profile, returning a signed-in session.

        Raises:
            ValidationError: If the form input is invalid
            ConflictError: If the email is already registered
        """
        validate_registration(email, username, password, confirm_password)
        email = email.strip().lower()

        if self.db.get_user_by_email(email) is not None:
            raise ConflictError(errors.email_already_registered(email))

        user_id = self.db.create_user(
            email=email,
            username=username.strip(),
            password_hash=generate_password_hash(password),
        )
        logger.info("Registered user %s", user_id)
        return Session(user_id=user_id, email=email, username=username.strip())

    def authenticate(self, email: str, password: str) -> Session:
        """Check credentials and return a session.

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = self.db.get_user_by_email(email.strip().lower())
        if user is None:
            raise AuthenticationError(errors.invalid_credentials())

        password_hash = self.db.get_password_hash(user.uid)
        if password_hash is None or not check_password_hash(password_hash, password):
            logger.info("Failed login for user %s", user.uid)
            raise AuthenticationError(errors.invalid_credentials())

        logger.info("User %s signed in", user.uid)
        return Session(user_id=user.uid, email=user.email, username=user.username)

    def resolve(self, session: Optional[Session]) -> User:
        """Return the user behind a session.

        Raises:
            AuthenticationError: If there is no session or its user is gone
        """
        if session is None:
            raise AuthenticationError(errors.not_signed_in())
        user = self.db.get_user(session.user_id)
        if user is None:
            raise AuthenticationError(errors.not_signed_in())
        return user
