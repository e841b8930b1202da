"""
Image I/O utilities for the Hough driver.

This module provides:
    • load_points(path, intensity_threshold)
    • points_from_image(image, intensity_threshold)
    • ensure_output_dir(path)
    • save_image(path, image)

Handles all filesystem interaction in a consistent, testable way.
"""

import math
import os
from typing import Tuple

import cv2
import numpy as np


# -------------------------------------------------------------------------
#  POINT EXTRACTION
# -------------------------------------------------------------------------

def points_from_image(image: np.ndarray, intensity_threshold: int = 127) -> np.ndarray:
    """
    Extracts the bright pixels of a grayscale image as points.

    NOTE: the origin is moved to the centre of the image and the y axis
    points up:

        x = col - ceil(width / 2)
        y = (height - row) - ceil(height / 2)

    Returns:
        (N, 2) int array of (x, y) points, in row-major pixel order.
    """
    if image.ndim == 3:
        image = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)

    height, width = image.shape[:2]
    semi_width = math.ceil(width / 2.0)
    semi_height = math.ceil(height / 2.0)

    rows, cols = np.nonzero(image > intensity_threshold)
    xs = cols - semi_width
    ys = (height - rows) - semi_height

    return np.stack([xs, ys], axis=1).astype(np.int64)


def load_points(path: str, intensity_threshold: int = 127) -> Tuple[np.ndarray, Tuple[int, int]]:
    """
    Loads an image and extracts its bright pixels as points.

    Returns:
        points: (N, 2) int array, see points_from_image()
        size:   (width, height) of the image

    Example:
        points, size = load_points('sample_small.bmp')
    """
    image = cv2.imread(path, cv2.IMREAD_GRAYSCALE)
    if image is None:
        raise FileNotFoundError(f"Could not read image: {path}")

    height, width = image.shape[:2]
    return points_from_image(image, intensity_threshold), (width, height)


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray):
    """
    Save an image to disk, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    if not cv2.imwrite(path, image):
        raise IOError(f"Could not write image: {path}")
