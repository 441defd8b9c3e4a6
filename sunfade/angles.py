#!/usr/bin/env python3
"""Cyclic angle helpers for hue values.

Every hue computation in this package goes through these two functions so
wraparound is handled in exactly one place:

* ``angle_distance`` gives the signed shortest arc between two angles
* ``normalize_hue`` folds any angle into [0, 360)

Remainders use ``math.fmod`` (sign follows the dividend), not Python's
floored ``%``.
"""

import math

FULL_CIRCLE = 360.0
HALF_CIRCLE = 180.0


def angle_distance(start: float, end: float) -> float:
    """Signed shortest distance from ``start`` to ``end`` in degrees.

    Result lies in [-180, 180]; negative means the decreasing direction.
    A difference of exactly 180 keeps its raw sign, so
    ``angle_distance(0, 180) == 180``.

    NaN propagates. Infinite inputs give NaN (``math.fmod`` would raise).
    """
    difference = end - start
    if not math.isfinite(difference):
        return math.nan

    difference = math.fmod(difference, FULL_CIRCLE)
    if difference < -HALF_CIRCLE:
        return difference + FULL_CIRCLE
    if difference > HALF_CIRCLE:
        return difference - FULL_CIRCLE
    return difference


def normalize_hue(hue: float) -> float:
    """Fold ``hue`` into [0, 360).

    Negative remainders (sign bit set) get 360 added. Two edges keep the
    result in range: -0.0 becomes +0.0, and a tiny negative remainder that
    rounds up to 360.0 becomes 0.0.
    """
    if not math.isfinite(hue):
        return math.nan

    hue = math.fmod(hue, FULL_CIRCLE)
    if hue == 0.0:
        # covers -0.0
        return 0.0
    if math.copysign(1.0, hue) < 0:
        hue += FULL_CIRCLE
    if hue >= FULL_CIRCLE:
        return 0.0
    return hue
