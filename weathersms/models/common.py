"""Common types and helpers shared across models."""

from datetime import UTC, datetime, timedelta


def utc_now() -> datetime:
    return datetime.now(UTC)


def from_epoch(seconds: int | float | str) -> datetime:
    """Convert Unix epoch seconds (as the provider sends them) to an aware UTC datetime."""
    try:
        return datetime.fromtimestamp(int(seconds), UTC)
    except (OverflowError, OSError) as e:
        raise ValueError(f"epoch out of range: {seconds}") from e


def local_utc_offset(now: datetime | None = None) -> timedelta:
    """Return this machine's current offset from UTC.

    Computed once per run; a DST transition during the run is not tracked.
    """
    now = now or utc_now()
    offset = now.astimezone().utcoffset()
    return offset if offset is not None else timedelta(0)
