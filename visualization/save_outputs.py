"""
Centralized output-saving utilities for the Hough driver.

This module provides:
    • save_all_outputs(...)
    • save_accumulator(...)
    • save_lines(...)
    • save_line_map(...)

Uses draw modules to visualize and utils.image_io for filesystem handling.
"""

import numpy as np
from typing import List

from models.line import Line

from visualization.draw_accumulator import render_accumulator
from visualization.draw_lines import draw_lines, build_line_map
from utils.image_io import save_image, ensure_output_dir


# -------------------------------------------------------------------------
#   Save individual components
# -------------------------------------------------------------------------

def save_accumulator(path: str, counts: np.ndarray, scale: float = 1.0 / 20.0):
    """
    Renders the accumulator counts and saves them to disk.
    """
    save_image(path, render_accumulator(counts, scale))


def save_lines(path: str, background: np.ndarray, lines: List[Line], factor: float = 1, **draw_kwargs):
    """
    Draw lines on a copy of the background image and save to disk.
    """
    if background.ndim == 2:
        vis = np.stack([background] * 3, axis=-1)
    else:
        vis = background.copy()
    draw_lines(vis, lines, factor=factor, **draw_kwargs)
    save_image(path, vis)


def save_line_map(path: str, lines: List[Line], shape_hw):
    """
    Writes the rasterized line map to disk.
    """
    save_image(path, build_line_map(lines, shape_hw))


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(
    output_dir: str,
    counts: np.ndarray,
    lines: List[Line],
    small_image: np.ndarray,
    large_image: np.ndarray,
    params: dict,
    names: dict,
):
    """
    Saves every output artifact for one run.

    names maps "accumulator", "output", "output_small" and "linemap" to
    file names inside output_dir.
    """

    ensure_output_dir(output_dir)

    draw_kwargs = {
        "min_abs_slope": params["MIN_ABS_SLOPE"],
        "min_abs_intercept": params["MIN_ABS_INTERCEPT"],
        "color": params["COLOR_LINE"],
    }

    # 1) Accumulator
    save_accumulator(
        f"{output_dir}/{names['accumulator']}",
        counts,
        params["ACCUMULATOR_SCALE"],
    )

    # 2) Lines over the large background
    save_lines(
        f"{output_dir}/{names['output']}",
        large_image,
        lines,
        factor=params["OUTPUT_FACTOR"],
        **draw_kwargs,
    )

    # 3) Lines over the input image
    save_lines(
        f"{output_dir}/{names['output_small']}",
        small_image,
        lines,
        factor=params["OUTPUT_SMALL_FACTOR"],
        **draw_kwargs,
    )

    # 4) Line map
    save_line_map(
        f"{output_dir}/{names['linemap']}",
        lines,
        small_image.shape[:2],
    )
