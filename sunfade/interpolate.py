#!/usr/bin/env python3
"""Plain linear interpolation for scalar and byte values."""

U8_MIN = 0
U8_MAX = 255


def lerp_f32(start: float, end: float, position: float) -> float:
    """Linear blend of ``start`` towards ``end``.

    ``position`` is not clamped; values outside 0..1 extrapolate.
    """
    length = end - start
    offset = length * position
    return start + offset


def lerp_u8(start: int, end: int, position: float) -> int:
    """Linear blend of two byte values (0-255).

    The float result is truncated toward zero and saturated into 0..255,
    the same as a float to u8 cast. Keeping ``position`` such that the
    result stays in range is the caller's job.
    """
    value = int(lerp_f32(float(start), float(end), position))
    return max(U8_MIN, min(U8_MAX, value))
