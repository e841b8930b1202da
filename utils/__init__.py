"""
Utility Functions

Provides the trigonometric cache, parameter-space geometry helpers,
Bresenham wrappers and image I/O utilities.
"""

from .trig_cache import TrigCache
from .geometry import (
    angle_distance,
    radius_distance,
    circular_mean,
    to_radians,
    to_degrees,
)
from .bresenham_utils import bres_line
from .image_io import load_points, points_from_image, ensure_output_dir, save_image

__all__ = [
    "TrigCache",
    "angle_distance",
    "radius_distance",
    "circular_mean",
    "to_radians",
    "to_degrees",
    "bres_line",
    "load_points",
    "points_from_image",
    "ensure_output_dir",
    "save_image",
]
