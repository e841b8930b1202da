"""
Sine / cosine lookup tables indexed by discretized angle.

Voting evaluates x*cos(t) + y*sin(t) for every point against every
angle, so the trigonometric functions are computed once per angle here
and only looked up afterwards.
"""

import numpy as np


class TrigCache:
    """
    sines[t]   = sin(t * pi / semi_circumference)
    cosines[t] = cos(t * pi / semi_circumference)

    for every t in [0, circumference).
    """

    def __init__(self, circumference: int, semi_circumference: int):
        self.circumference = circumference
        self.semi_circumference = semi_circumference

        radians = np.arange(circumference, dtype=np.float64) * np.pi / semi_circumference
        self.sines = np.sin(radians)
        self.cosines = np.cos(radians)

        # read only from the outside
        self.sines.flags.writeable = False
        self.cosines.flags.writeable = False

    def sine(self, angle: int) -> float:
        return float(self.sines[angle])

    def cosine(self, angle: int) -> float:
        return float(self.cosines[angle])

    def __len__(self):
        return self.circumference
