#!/usr/bin/env python3
"""Time-of-day arithmetic used to derive hue targets and tick delays."""

from datetime import date, datetime, time, timedelta

SECONDS_IN_MINUTE = 60
SECONDS_IN_HOUR = SECONDS_IN_MINUTE * 60
SECONDS_IN_DAY = SECONDS_IN_HOUR * 24

MICROSECONDS_IN_SECOND = 1_000_000

_ONE_DAY = timedelta(seconds=SECONDS_IN_DAY)


def minutes_from_midnight(when: time) -> int:
    """Whole minutes elapsed since 00:00."""
    seconds = when.hour * SECONDS_IN_HOUR + when.minute * SECONDS_IN_MINUTE + when.second
    return seconds // SECONDS_IN_MINUTE


def calc_hue(when: time) -> int:
    """Clock-driven hue: minutes of the day wrapped onto the colour wheel.

    The hue walks the full wheel every six hours (00:30 -> 30, 06:00 -> 0).
    """
    return minutes_from_midnight(when) % 360


def duration_until_next_full_minute(when: time) -> timedelta:
    remaining_seconds = max(0, 59 - when.second)
    remaining_micros = MICROSECONDS_IN_SECOND - when.microsecond
    return timedelta(seconds=remaining_seconds, microseconds=remaining_micros)


def duration_until_next_full_second(when: time) -> timedelta:
    return timedelta(microseconds=MICROSECONDS_IN_SECOND - when.microsecond)


def duration_until(now: time, target: time) -> timedelta:
    """Time from ``now`` until the next occurrence of ``target``.

    Wraps over midnight when ``target`` is earlier in the day, so the result
    is always in [0, 24h).
    """
    anchor = date(2000, 1, 1)
    delta = datetime.combine(anchor, target) - datetime.combine(anchor, now)
    if delta < timedelta(0):
        delta += _ONE_DAY
    return delta
