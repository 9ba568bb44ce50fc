"""Timezone handling for authored timestamps (always UTC-aware in the domain)."""

from datetime import UTC, datetime


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Return dt as a UTC-aware datetime (None stays None).

    Naive values are taken to be UTC already; SQLite hands back naive values
    for timezone-aware columns, so repositories normalize on every read and write.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
