"""
Point voting.

This module provides:
    • project_point(x, y, trig_cache, semi_circumference)
    • cast_point(index, point, trig_cache, accumulator, classify)
"""

from typing import Callable, List, Tuple

import numpy as np


def project_point(x: int, y: int, trig_cache, semi_circumference: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sinusoid of (x, y) in parameter space.

    For every angle t in [0, semi_circumference):
        r = round(x * cos(t) + y * sin(t))

    Going through half a turn is enough to cover all directions: a
    negative r is folded into the positive representation
    (semi_circumference + t, -r).

    Returns:
        (angles, distances) as integer arrays, in angle order.
    """
    thetas = np.arange(semi_circumference)
    raw = x * trig_cache.cosines[:semi_circumference] + y * trig_cache.sines[:semi_circumference]
    raw = np.rint(raw).astype(np.int64)

    negative = raw < 0
    angles = np.where(negative, thetas + semi_circumference, thetas)
    distances = np.abs(raw)
    return angles, distances


def cast_point(
    index: int,
    point,
    trig_cache,
    accumulator,
    classify: Callable[[int, int], object],
) -> List[Tuple[int, int]]:
    """
    Votes every cell on the sinusoid of `point` and classifies the cells
    that cross the threshold, in angle order.

    A cell is marked processed before `classify` is called, so later
    votes into it never classify it again.

    Returns:
        list of (angle, distance) cells classified during this cast.
    """
    x, y = point
    angles, distances = project_point(int(x), int(y), trig_cache, accumulator.circumference // 2)

    classified = []
    for angle, distance in zip(angles.tolist(), distances.tolist()):
        if accumulator.vote(angle, distance, index):
            accumulator.mark_processed(angle, distance)
            classify(angle, distance)
            classified.append((angle, distance))

    return classified
