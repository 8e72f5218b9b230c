"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class AuthenticationError(DomainError):
    """Bad credentials or missing session."""


MIN_PASSWORD_LENGTH = 6


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def unknown_category(category: str) -> str:
    """Return message for a category outside the fixed set."""
    return f"Unknown category '{category}'"


def email_already_registered(email: str) -> str:
    """Return message when an email is taken."""
    return f"An account with email '{email}' already exists"


def password_too_short() -> str:
    """Return message for passwords below the minimum length."""
    return f"Password should be at least {MIN_PASSWORD_LENGTH} characters"


def passwords_do_not_match() -> str:
    """Return message for mismatched password confirmation."""
    return "Passwords do not match"


def invalid_credentials() -> str:
    """Return message for a failed login."""
    return "Invalid email or password"


def not_signed_in() -> str:
    """Return message when an operation needs a session."""
    return "Not signed in. Run 'saldo login' first."
