"""Record Timestamps — created_at/updated_at rules, pure and clock-injected.

Invariants:
    - All returned datetimes are timezone-aware UTC
    - next_updated_at(previous, now) > previous, always
    - Naive datetimes (SQLite drops tzinfo) are interpreted as UTC
"""

from datetime import datetime, timedelta, timezone

_TICK = timedelta(microseconds=1)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive values, convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def next_updated_at(previous: datetime, now: datetime | None = None) -> datetime:
    """Timestamp for a mutation: the current instant, bumped past previous if the clock lags."""
    now = as_utc(now or utc_now())
    previous = as_utc(previous)
    if now <= previous:
        return previous + _TICK
    return now
