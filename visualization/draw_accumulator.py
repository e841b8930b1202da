"""
Visual interpretation of the accumulator.

Angles run along the x axis, distances along the y axis (growing
upward). The red channel of every pixel is count * scale, saturated at
full intensity.
"""

import numpy as np


def render_accumulator(counts: np.ndarray, scale: float = 1.0 / 20.0) -> np.ndarray:
    """
    Args:
        counts: accumulator count grid indexed [angle, distance]
        scale: red intensity (0..1) contributed by each vote

    Returns:
        BGR uint8 image of shape (num_distances, num_angles, 3)
    """
    intensity = np.clip(counts.astype(np.float64) * scale, 0.0, 1.0)

    # rows = distances, bottom row = distance 0
    red = np.flipud(intensity.T)

    image = np.zeros(red.shape + (3,), dtype=np.uint8)
    image[..., 2] = np.round(red * 255).astype(np.uint8)
    return image
