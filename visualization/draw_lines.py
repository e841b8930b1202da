"""
Visualization utilities for rendering detected lines.

This module provides:
    • keep_line(line, min_abs_slope, min_abs_intercept)
    • line_endpoints(line, width, height, factor)
    • draw_lines(image, lines, factor, ...)
    • build_line_map(lines, shape_hw, ...)

Lines live in centre-origin coordinates with the y axis pointing up;
everything here converts them to pixel coordinates:

    col = x + ceil(width / 2)
    row = height - y - ceil(height / 2)
"""

import math
from typing import List, Tuple

import cv2
import numpy as np

from models.line import Line
from utils.bresenham_utils import bres_line

# keeps near-vertical lines inside what cv2 accepts as coordinates
COORD_LIMIT = 1e6


# ---------------------------------------------------------------------
#  FILTERING
# ---------------------------------------------------------------------

def keep_line(line: Line, min_abs_slope: float = 0.5, min_abs_intercept: float = 1.0) -> bool:
    """
    Drops lines too horizontal (|m| < min_abs_slope) and lines passing
    through the origin (|b| < min_abs_intercept). Vertical lines are kept.
    """
    if line.is_vertical:
        return True
    if abs(line.slope) < min_abs_slope:
        return False
    if abs(line.intercept) < min_abs_intercept:
        return False
    return True


# ---------------------------------------------------------------------
#  COORDINATES
# ---------------------------------------------------------------------

def line_endpoints(line: Line, width: int, height: int, factor: float = 1) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    """
    Pixel endpoints of `line` spanning the whole image width (or height
    for vertical lines). `factor` scales the centre-origin coordinates
    before they are moved to pixel space.
    """
    semi_width = math.ceil(width / 2.0)
    semi_height = math.ceil(height / 2.0)

    if line.is_vertical:
        x0 = x1 = line.x_position
        y0, y1 = -semi_height, semi_height
    else:
        x0, x1 = -semi_width, semi_width
        y0, y1 = line.y_at(x0), line.y_at(x1)

    x0, y0, x1, y1 = np.clip(np.array([x0, y0, x1, y1]) * factor, -COORD_LIMIT, COORD_LIMIT)

    p0 = (int(round(x0 + semi_width)), int(round(height - y0 - semi_height)))
    p1 = (int(round(x1 + semi_width)), int(round(height - y1 - semi_height)))
    return p0, p1


# ---------------------------------------------------------------------
#  DRAWING
# ---------------------------------------------------------------------

def draw_lines(
    image,
    lines: List[Line],
    factor: float = 1,
    color: Tuple[int, int, int] = (0, 0, 255),
    min_abs_slope: float = 0.5,
    min_abs_intercept: float = 1.0,
):
    """
    Draws a list of detected lines onto an image.

    Args:
        image: BGR numpy array (modified in-place)
        lines: list of Line objects
        factor: scale applied to line coordinates and stroke width
        color: (B, G, R)
        min_abs_slope / min_abs_intercept: see keep_line()
    """
    height, width = image.shape[:2]
    thickness = max(1, int(round(0.5 * factor)))

    for ln in lines:
        if not keep_line(ln, min_abs_slope, min_abs_intercept):
            continue

        p0, p1 = line_endpoints(ln, width, height, factor)
        cv2.line(image, p0, p1, color, thickness)

    return image


def build_line_map(lines: List[Line], shape_hw, factor: float = 1, value: int = 255) -> np.ndarray:
    """
    Rasterizes every line (unfiltered) into a uint8 mask using Bresenham.

    Returns:
        2D map where pixel values = value on a line, 0 elsewhere.
    """
    h, w = shape_hw
    line_map = np.zeros((h, w), dtype=np.uint8)

    for ln in lines:
        p0, p1 = line_endpoints(ln, w, h, factor)
        visible, q0, q1 = cv2.clipLine((0, 0, w, h), p0, p1)
        if not visible:
            continue

        for x, y in bres_line(q0[0], q0[1], q1[0], q1[1]):
            if 0 <= x < w and 0 <= y < h:
                line_map[y, x] = value

    return line_map
