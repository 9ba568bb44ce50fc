"""Tests for shared utilities (ensure_utc, generate_cuid)."""

from datetime import datetime, timedelta, timezone

from content.shared.utils import ensure_utc, generate_cuid


def test_ensure_utc_none() -> None:
    assert ensure_utc(None) is None


def test_ensure_utc_naive_is_taken_as_utc() -> None:
    result = ensure_utc(datetime(2020, 5, 8, 12, 0))
    assert result == datetime(2020, 5, 8, 12, 0, tzinfo=timezone.utc)


def test_ensure_utc_converts_offsets() -> None:
    local = datetime(2020, 5, 8, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    result = ensure_utc(local)
    assert result.hour == 12
    assert result.utcoffset() == timedelta(0)


def test_generate_cuid_unique_strings() -> None:
    ids = {generate_cuid() for _ in range(50)}
    assert len(ids) == 50
    assert all(isinstance(value, str) and value for value in ids)
