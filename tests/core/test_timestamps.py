"""Tests for record timestamp rules — updated_at must strictly increase."""

from datetime import datetime, timedelta, timezone

from artist_catalog.core.timestamps import as_utc, next_updated_at, utc_now


def test_utc_now_is_aware():
    assert utc_now().tzinfo is not None


def test_as_utc_attaches_utc_to_naive():
    naive = datetime(2025, 9, 16, 12, 0, 0)
    assert as_utc(naive) == datetime(2025, 9, 16, 12, 0, 0, tzinfo=timezone.utc)


def test_as_utc_converts_other_offsets():
    plus_two = timezone(timedelta(hours=2))
    value = datetime(2025, 9, 16, 14, 0, 0, tzinfo=plus_two)
    assert as_utc(value) == datetime(2025, 9, 16, 12, 0, 0, tzinfo=timezone.utc)


def test_next_updated_at_uses_clock_when_ahead():
    previous = datetime(2025, 1, 1, tzinfo=timezone.utc)
    now = datetime(2025, 1, 2, tzinfo=timezone.utc)
    assert next_updated_at(previous, now) == now


def test_next_updated_at_bumps_when_clock_equal():
    previous = datetime(2025, 1, 1, tzinfo=timezone.utc)
    assert next_updated_at(previous, previous) == previous + timedelta(microseconds=1)


def test_next_updated_at_bumps_when_clock_behind():
    previous = datetime(2025, 1, 2, tzinfo=timezone.utc)
    now = datetime(2025, 1, 1, tzinfo=timezone.utc)
    assert next_updated_at(previous, now) > previous


def test_next_updated_at_accepts_naive_previous():
    previous = datetime(2025, 1, 1)
    result = next_updated_at(previous, datetime(2025, 1, 1, tzinfo=timezone.utc))
    assert result.tzinfo is not None
    assert result > as_utc(previous)
