#!/usr/bin/env python3
"""Relative daylight brightness from sun position.

The model places an instant between civil dawn and civil dusk relative to
solar noon and applies a cubic falloff:

    brightness = 1 - (|noon - t| / (noon - dawn)) ** 3

so light stays near full strength around noon and drops off steeply towards
dawn and dusk. Sun times and altitude come from ``astral``; all timestamps
are milliseconds since the Unix epoch.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from astral import Observer
from astral.sun import dawn, dusk, elevation as solar_elevation, noon

logger = logging.getLogger(__name__)

# Sentinel for "no dawn/dusk today" (polar day or polar night)
NO_EVENT = 0

MINUTES_PER_DEGREE = 4


@dataclass(frozen=True)
class SunTimes:
    """Civil dawn, solar noon and civil dusk in epoch milliseconds.

    ``dawn`` or ``dusk`` equal to ``NO_EVENT`` means the sun does not cross
    the civil twilight line on that day.
    """

    dawn: int
    solar_noon: int
    dusk: int

    @property
    def is_polar(self) -> bool:
        return not self.dawn or not self.dusk


# ---------------------------------------------------------------------------
# Time conversion helpers
# ---------------------------------------------------------------------------

def to_timestamp_millis(when: datetime) -> int:
    """Epoch milliseconds for ``when``; naive datetimes are taken as UTC."""
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return round(when.timestamp() * 1000)


def from_timestamp_millis(timestamp: int) -> datetime:
    """UTC datetime for an epoch-millisecond timestamp."""
    return datetime.fromtimestamp(timestamp / 1000, tz=timezone.utc)


def _observer(latitude: float, longitude: float, height: Optional[float]) -> Observer:
    return Observer(latitude=latitude, longitude=longitude, elevation=height or 0.0)


def local_mean_time(longitude: float) -> timezone:
    """Fixed-offset zone of local mean solar time (4 minutes per degree)."""
    return timezone(timedelta(minutes=round(longitude * MINUTES_PER_DEGREE)))


# ---------------------------------------------------------------------------
# astral lookups
# ---------------------------------------------------------------------------

def get_sun_times(
    timestamp: int,
    latitude: float,
    longitude: float,
    height: Optional[float] = None,
) -> SunTimes:
    """Sun times for the local solar day containing ``timestamp``.

    The day is taken in local mean time at ``longitude``, and astral is
    asked for events on that same day, so dawn, noon and dusk always belong
    to one solar cycle whatever the distance from Greenwich.

    astral raises ``ValueError`` when the sun never reaches civil twilight
    depression; that event is reported as ``NO_EVENT``.
    """
    observer = _observer(latitude, longitude, height)
    local_tz = local_mean_time(longitude)
    day = from_timestamp_millis(timestamp).astimezone(local_tz).date()

    def _event(func) -> int:
        try:
            return to_timestamp_millis(func(observer, date=day, tzinfo=local_tz))
        except ValueError as e:
            logger.warning(
                f"No {func.__name__} on {day} at lat={latitude}, lon={longitude}: {e}"
            )
            return NO_EVENT

    times = SunTimes(
        dawn=_event(dawn),
        solar_noon=to_timestamp_millis(noon(observer, date=day, tzinfo=local_tz)),
        dusk=_event(dusk),
    )
    if not times.is_polar and not times.dawn <= times.solar_noon <= times.dusk:
        logger.warning(f"Sun times out of order for {day} at lon={longitude}: {times}")
    logger.debug(f"Sun times for {day} at lat={latitude}, lon={longitude}: {times}")
    return times


def sun_altitude(
    timestamp: int,
    latitude: float,
    longitude: float,
    height: Optional[float] = None,
) -> float:
    """Sun altitude above the horizon in degrees at ``timestamp``."""
    observer = _observer(latitude, longitude, height)
    return solar_elevation(observer, from_timestamp_millis(timestamp))


# ---------------------------------------------------------------------------
# Brightness model
# ---------------------------------------------------------------------------

def relative_brightness(
    timestamp: int,
    latitude: float,
    longitude: float,
    height: Optional[float] = None,
    sun_times: Optional[SunTimes] = None,
) -> float:
    """Relative daylight brightness (0.0-1.0) at ``timestamp``.

    Args:
        timestamp: Instant in epoch milliseconds
        latitude: Observer latitude in degrees
        longitude: Observer longitude in degrees
        height: Observer height in metres
        sun_times: Precomputed sun times for the instant's date; looked up
            with astral when omitted

    Returns:
        1.0 at solar noon, 0.0 before dawn and after dusk. Above the polar
        circle (no dawn or dusk) the result is 1.0 while the sun is above
        the horizon and 0.0 otherwise, whatever the time of day.

    Raises:
        AssertionError: The computed factor left 0.0-1.0 or is undefined.
            This happens when dusk lies further from noon than dawn does, or
            dawn is not before noon, and points at bad sun-time data rather
            than a recoverable condition.
    """
    if sun_times is None:
        sun_times = get_sun_times(timestamp, latitude, longitude, height)

    if sun_times.is_polar:
        # Above polar circle: it is either 24h day or 24h night
        altitude = sun_altitude(timestamp, latitude, longitude, height)
        logger.debug(f"Polar branch: altitude {altitude:.2f}°")
        return 1.0 if altitude > 0.0 else 0.0

    if timestamp < sun_times.dawn or timestamp > sun_times.dusk:
        return 0.0

    max_distance = float(sun_times.solar_noon - sun_times.dawn)
    current_distance = float(abs(sun_times.solar_noon - timestamp))
    if max_distance > 0.0:
        relative_distance = current_distance / max_distance
        brightness_factor = 1.0 - relative_distance ** 3
    else:
        # dawn at or after noon
        brightness_factor = math.nan

    if not 0.0 <= brightness_factor <= 1.0:
        logger.error(
            f"Brightness model out of range at {timestamp} with {sun_times}: "
            f"{brightness_factor}"
        )
        raise AssertionError(
            f"brightness_factor is not between 0.0 and 1.0: {brightness_factor} "
            f"(timestamp={timestamp}, {sun_times})"
        )
    return brightness_factor


# ---------------------------------------------------------------------------
# Helper: resolve lat/lon/height from HA-style env vars
# ---------------------------------------------------------------------------

def _env_float(*names: str) -> Optional[float]:
    for name in names:
        raw = os.getenv(name)
        if raw in (None, ""):
            continue
        try:
            return float(raw)
        except ValueError:
            logger.warning(f"Ignoring non-numeric {name}={raw!r}")
    return None


def _auto_location(
    lat: Optional[float],
    lon: Optional[float],
    height: Optional[float],
) -> Tuple[Optional[float], Optional[float], Optional[float]]:
    if lat is None:
        lat = _env_float("HASS_LATITUDE", "LATITUDE")
    if lon is None:
        lon = _env_float("HASS_LONGITUDE", "LONGITUDE")
    if height is None:
        height = _env_float("HASS_ELEVATION", "HEIGHT")
    return lat, lon, height


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def calc_relative_brightness_of_time(
    when: datetime,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
    height: Optional[float] = None,
) -> float:
    """Relative daylight brightness for a datetime.

    Naive datetimes are treated as UTC. Missing coordinates are read from
    ``HASS_LATITUDE``/``LATITUDE`` and ``HASS_LONGITUDE``/``LONGITUDE``;
    height falls back to ``HASS_ELEVATION``/``HEIGHT``.
    """
    latitude, longitude, height = _auto_location(latitude, longitude, height)
    if latitude is None or longitude is None:
        raise ValueError("Latitude/longitude not provided and not found in env vars")

    timestamp = to_timestamp_millis(when)
    brightness = relative_brightness(timestamp, latitude, longitude, height)
    logger.debug(f"{when.isoformat()}: relative brightness {brightness:.3f}")
    return brightness
