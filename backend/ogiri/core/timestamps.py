"""Timestamps — UTC clock and the strictly-advancing updated_at rule."""

from datetime import datetime, timedelta, timezone

TICK = timedelta(microseconds=1)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def advance(previous: datetime | None, now: datetime | None = None) -> datetime:
    """Next updated_at: the clock, bumped past `previous` if the clock lags."""
    now = now or utc_now()
    if previous is not None and now <= previous:
        return previous + TICK
    return now
