"""SQLAlchemy models for saldo database.

Timestamps are stored as naive UTC values; mappers normalise them back to
aware instants.
"""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Numeric,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


class User(Base):
    """Registered user with hashed password."""

    __tablename__ = "users"

    uid = Column(String(32), primary_key=True)
    email = Column(String, unique=True, nullable=False)
    username = Column(String, nullable=False)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    # Relationships
    balance = relationship("Balance", back_populates="owner", uselist=False, cascade="all, delete-orphan")
    transactions = relationship("Transaction", back_populates="owner", cascade="all, delete-orphan")


class Balance(Base):
    """Running balance, one row per owner."""

    __tablename__ = "balances"

    owner_id = Column(String(32), ForeignKey("users.uid"), primary_key=True)
    current = Column(Numeric(18, 2), nullable=False, default=0)
    last_updated = Column(DateTime, default=_utcnow, nullable=False)

    # Relationships
    owner = relationship("User", back_populates="balance")


class Transaction(Base):
    """Income or expense record."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String(32), ForeignKey("users.uid"), nullable=False, index=True)
    amount = Column(Numeric(18, 2), nullable=False)
    kind = Column(String(16), nullable=False)
    category = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    occurred_at = Column(DateTime, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    # Relationships
    owner = relationship("User", back_populates="transactions")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
