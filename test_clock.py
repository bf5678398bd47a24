"""Tests for timezone resolution and the midnight refresh delay."""

from datetime import datetime, timedelta, timezone

import pytest

import clock


def test_now_is_aware_in_requested_zone():
    instant = clock.now("Asia/Ho_Chi_Minh")
    assert instant.tzinfo is not None
    assert instant.utcoffset() == timedelta(hours=7)


def test_default_zone_is_indochina_time():
    assert clock.now().utcoffset() == timedelta(hours=7)


@pytest.mark.parametrize("name", ["Mars/Olympus_Mons", "America", "Europe", "", "   ", None])
def test_unknown_zone_raises(name):
    with pytest.raises(clock.ClockUnavailable):
        clock.now(name)


def test_seconds_until_midnight_fixed_offset():
    ict = timezone(timedelta(hours=7))
    assert clock.seconds_until_midnight(datetime(2024, 3, 15, 23, 0, tzinfo=ict)) == 3600
    assert clock.seconds_until_midnight(datetime(2024, 3, 15, 0, 0, tzinfo=ict)) == 86400
    assert clock.seconds_until_midnight(datetime(2024, 12, 31, 12, 0, tzinfo=ict)) == 43200


def test_seconds_until_midnight_across_dst():
    berlin = clock.get_zone("Europe/Berlin")
    # Clocks jump from 02:00 to 03:00 on 2024-03-31, so that day has 23 hours
    start = datetime(2024, 3, 31, 1, 0, tzinfo=berlin)
    assert clock.seconds_until_midnight(start) == 22 * 3600


def test_seconds_until_midnight_needs_aware_instant():
    with pytest.raises(ValueError):
        clock.seconds_until_midnight(datetime(2024, 3, 15, 12, 0))
