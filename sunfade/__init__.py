from .angles import angle_distance, normalize_hue
from .hsv import Hsv, interpolate
from .interpolate import lerp_f32, lerp_u8
from .light import approach_hue, approach_linear
from .location import (
    SunTimes,
    calc_relative_brightness_of_time,
    get_sun_times,
    relative_brightness,
)

__all__ = [
    "angle_distance",
    "normalize_hue",
    "Hsv",
    "interpolate",
    "lerp_f32",
    "lerp_u8",
    "approach_hue",
    "approach_linear",
    "SunTimes",
    "calc_relative_brightness_of_time",
    "get_sun_times",
    "relative_brightness",
]
