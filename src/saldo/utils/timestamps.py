"""Timestamp normalisation.

Stored timestamps can reach the application in two shapes: a native
``datetime`` or a serialized ``{seconds, nanoseconds}`` pair as written by
document stores. Both are converted to one canonical form, a timezone-aware
UTC ``datetime``, before any domain code sees them.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, UTC
from typing import Any, Mapping, Union


@dataclass(frozen=True)
class SerializedInstant:
    """Instant serialized as whole seconds plus nanoseconds since the epoch."""

    seconds: int
    nanoseconds: int = 0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SerializedInstant":
        """Build from a ``{"seconds": ..., "nanoseconds": ...}`` mapping."""
        try:
            return cls(
                seconds=int(data["seconds"]),
                nanoseconds=int(data.get("nanoseconds", 0)),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid serialized instant {dict(data)!r}: {e}")

    def to_datetime(self) -> datetime:
        """Convert to an aware UTC datetime (microsecond precision)."""
        base = datetime.fromtimestamp(self.seconds, tz=UTC)
        return base + timedelta(microseconds=self.nanoseconds // 1000)


Instant = Union[datetime, SerializedInstant]


def normalize_instant(value: Union[Instant, Mapping[str, Any]]) -> datetime:
    """Normalise any supported instant shape to an aware UTC datetime.

    Naive datetimes are taken to already be in UTC, which is how the
    SQLite backend hands them back.

    Raises:
        ValueError: If the value is not a recognised instant shape
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)
    if isinstance(value, SerializedInstant):
        return value.to_datetime()
    if isinstance(value, Mapping):
        return SerializedInstant.from_mapping(value).to_datetime()
    raise ValueError(f"Unsupported timestamp value: {value!r}")


def to_storage(value: datetime) -> datetime:
    """Convert a canonical instant to the naive UTC form stored in SQLite."""
    return normalize_instant(value).replace(tzinfo=None)


def utcnow() -> datetime:
    """Current instant in canonical form."""
    return datetime.now(UTC)
