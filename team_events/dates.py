"""Date helpers for splitting and ordering events."""

from datetime import UTC, datetime
from typing import Protocol


class Dated(Protocol):
    """Anything with a timezone-aware ``date``."""

    date: datetime


def utc_now() -> datetime:
    """Default clock."""
    return datetime.now(UTC)


def is_past_event(event: Dated, now: datetime | None = None) -> bool:
    """An event is past once its date is at or before ``now``.

    Args:
        event: Raw event or view model
        now: Evaluation instant (current time when omitted)
    """
    return event.date <= (now or utc_now())


def ascending_by_date(a: Dated, b: Dated) -> int:
    """Comparator: earliest event first."""
    return (a.date > b.date) - (a.date < b.date)


def descending_by_date(a: Dated, b: Dated) -> int:
    """Comparator: latest event first."""
    return ascending_by_date(b, a)
