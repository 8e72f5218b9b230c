"""Balance domain service."""

import logging
from decimal import Decimal

from saldo.database.base import Database
from saldo.domain.entities import Balance, Session
from saldo.domain.errors import ValidationError
from saldo.utils.timestamps import utcnow

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


class BalanceService:
    """Service for reading and manually adjusting the running balance.

    Manual adjustments set the balance directly and are not reconciled
    against transaction history.
    """

    def __init__(self, db: Database):
        """Initialize balance service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_balance(self, session: Session) -> Balance:
        """Get the owner's balance, creating it at zero on first access."""
        balance = self.db.get_balance(session.user_id)
        if balance is None:
            self.db.set_balance(session.user_id, ZERO)
            balance = Balance(owner_id=session.user_id, current=ZERO, last_updated=utcnow())
        return balance

    def get_current(self, session: Session) -> Decimal:
        return self.get_balance(session).current

    def top_up(self, session: Session, amount: Decimal) -> Decimal:
        """Add money to the balance. Returns the new balance."""
        _require_positive(amount)
        new_balance = self.get_current(session) + amount
        self.db.set_balance(session.user_id, new_balance)
        logger.info("Balance top-up of %s for owner %s", amount, session.user_id)
        return new_balance

    def deduct(self, session: Session, amount: Decimal) -> Decimal:
        """Take money off the balance. Returns the new balance."""
        _require_positive(amount)
        new_balance = self.get_current(session) - amount
        self.db.set_balance(session.user_id, new_balance)
        logger.info("Balance deduction of %s for owner %s", amount, session.user_id)
        return new_balance

    def reset(self, session: Session) -> Decimal:
        """Set the balance back to zero."""
        self.db.set_balance(session.user_id, ZERO)
        logger.info("Balance reset for owner %s", session.user_id)
        return ZERO


def _require_positive(amount: Decimal) -> None:
    if amount is None or amount <= 0:
        raise ValidationError("Amount must be greater than zero")
