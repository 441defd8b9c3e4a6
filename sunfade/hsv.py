#!/usr/bin/env python3
"""HSV colour value and shortest-arc interpolation between two colours."""

from __future__ import annotations

import colorsys
from dataclasses import dataclass
from typing import Tuple

from .angles import angle_distance, normalize_hue


@dataclass(frozen=True)
class Hsv:
    """Hue/saturation/brightness triple.

    Ranges are a caller contract and are not enforced here; saturation and
    brightness outside 0-100 flow through interpolation unchanged.
    """

    hue: float  # Degrees, conventionally 0-360
    saturation: float  # 0-100
    brightness: float  # Brightness / value, 0-100

    @classmethod
    def from_hue(cls, hue: float) -> "Hsv":
        """Fully saturated, fully bright swatch of ``hue``."""
        return cls(hue=hue, saturation=100.0, brightness=100.0)

    def distance_to(self, target: "Hsv") -> "Hsv":
        """Per-channel delta towards ``target``; hue takes the shortest arc."""
        return Hsv(
            hue=angle_distance(self.hue, target.hue),
            saturation=target.saturation - self.saturation,
            brightness=target.brightness - self.brightness,
        )

    @staticmethod
    def interpolate(start: "Hsv", end: "Hsv", position: float) -> "Hsv":
        """Blend ``start`` towards ``end`` at ``position`` (0.0-1.0).

        Positions at or below 0 return ``start`` and at or above 1 return
        ``end`` without any arithmetic, so the endpoints are exact. Hue moves
        along the shorter arc (350 -> 10 passes through 0), saturation and
        brightness blend linearly without clamping.
        """
        if position <= 0.0:
            return start
        if position >= 1.0:
            return end

        distances = start.distance_to(end)
        return Hsv(
            hue=normalize_hue(distances.hue * position + start.hue),
            saturation=distances.saturation * position + start.saturation,
            brightness=distances.brightness * position + start.brightness,
        )

    def to_rgb_u8(self) -> Tuple[int, int, int]:
        """Convert to 8-bit RGB.

        Channels are truncated, not rounded (50% grey is 127). Hue wraps, so
        360 and -360 are both red.
        """
        red, green, blue = colorsys.hsv_to_rgb(
            normalize_hue(self.hue) / 360.0,
            self.saturation / 100.0,
            self.brightness / 100.0,
        )
        return (int(red * 255.0), int(green * 255.0), int(blue * 255.0))


def interpolate(start: Hsv, end: Hsv, position: float) -> Hsv:
    """Module-level alias for :meth:`Hsv.interpolate`."""
    return Hsv.interpolate(start, end, position)
