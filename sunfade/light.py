#!/usr/bin/env python3
"""Per-tick stepping of displayed values towards their targets.

Each call moves a value by at most ``step_size`` and snaps exactly onto the
target once it is within reach, so repeated calls from a tick loop converge
without overshoot or oscillation.
"""

import math
import os

from .angles import angle_distance, normalize_hue

# Default step per tick (env-overridable like the other lighting defaults)
DEFAULT_BRIGHTNESS_STEP = float(os.getenv("BRIGHTNESS_STEP", "1.0"))
DEFAULT_HUE_STEP = float(os.getenv("HUE_STEP", "1.0"))

# Linear values are percentages (brightness, saturation)
LINEAR_MIN = 0.0
LINEAR_MAX = 100.0


def _clamp(value: float, low: float = LINEAR_MIN, high: float = LINEAR_MAX) -> float:
    if math.isnan(value):
        return value
    return max(low, min(high, value))


def approach_linear(
    current: float,
    target: float,
    step_size: float = DEFAULT_BRIGHTNESS_STEP,
) -> float:
    """Move a 0-100 value one step towards ``target``.

    A NaN distance (uninitialised ``current`` or NaN ``target``) snaps to
    the target. Infinite values step once and are then pinned by the
    0-100 clamp, e.g. ``approach_linear(inf, 0, 1) == 100``.
    """
    distance = target - current
    if math.isnan(distance) or abs(distance) <= step_size:
        return _clamp(target)

    if math.copysign(1.0, distance) > 0:
        next_value = current + step_size
    else:
        next_value = current - step_size
    return _clamp(next_value)


def approach_hue(
    current: float,
    target: float,
    step_size: float = DEFAULT_HUE_STEP,
) -> float:
    """Move a hue one step towards ``target`` along the shorter arc.

    ``approach_hue(359, 10, 1) == 0`` and ``approach_hue(0, 350, 1) == 359``.
    Infinite or NaN ``current`` has no defined distance and snaps to target.
    """
    distance = angle_distance(current, target)
    if math.isnan(distance) or abs(distance) <= step_size:
        return target

    if math.copysign(1.0, distance) > 0:
        next_value = current + step_size
    else:
        next_value = current - step_size
    return normalize_hue(next_value)
