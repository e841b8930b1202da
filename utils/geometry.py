"""
This module provides:
    - angle_distance      (shortest path on the discretized circle)
    - radius_distance
    - circular_mean       (mean of circular quantities)
    - to_radians / to_degrees for discretized angles
"""

import math

import numpy as np


# ----------------------------------------------------------------------
#  DISTANCES IN PARAMETER SPACE
# ----------------------------------------------------------------------

def angle_distance(t1, t2, circumference):
    """
    Distance between two discretized angles.

    If the plain difference is over half a turn, the "other" distance
    (short path) is taken, so 1 and 359 are 2 apart when
    circumference = 360.
    """
    d = abs(t1 - t2)
    if d > circumference / 2:
        d = circumference - d
    return d


def radius_distance(r1, r2):
    return abs(r1 - r2)


# ----------------------------------------------------------------------
#  CIRCULAR MEAN
# ----------------------------------------------------------------------

def circular_mean(angles, trig_cache):
    """
    Mean of discretized angles following
    http://en.wikipedia.org/wiki/Mean_of_circular_quantities

        atan2(mean(sin t_i), mean(cos t_i)) * semi_circumference / pi

    Sines and cosines come from the cache. The result is normalised
    into [0, circumference).
    """
    idx = np.asarray(angles, dtype=np.intp)
    if idx.size == 0:
        raise ValueError("circular_mean() of an empty sequence")

    mean_sin = float(trig_cache.sines[idx].mean())
    mean_cos = float(trig_cache.cosines[idx].mean())

    t = math.atan2(mean_sin, mean_cos) * trig_cache.semi_circumference / math.pi
    return t % trig_cache.circumference


# ----------------------------------------------------------------------
#  UNIT CONVERSIONS
# ----------------------------------------------------------------------

def to_radians(t, semi_circumference):
    return t * math.pi / semi_circumference


def to_degrees(t, precision):
    return t / precision
