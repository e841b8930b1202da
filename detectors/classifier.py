"""
Online classifier for accumulator cells.

Cells are classified once, the first time they cross the vote
threshold. Each one either joins the nearest existing Center or seeds a
new one:

    dt       = shortest circular distance between angles
    dr       = |r1 - r2|
    distance = max(dt, dr)

    nearest dt or dr over tolerance (or no centers yet) → new center
    otherwise                                         → merge

Merging recomputes the center as the linear mean of the distances and
the circular mean of the angles, see utils.geometry.circular_mean().
"""

import logging
from typing import List, Optional, Tuple

from models.center import Center
from utils.geometry import angle_distance, radius_distance, circular_mean

logger = logging.getLogger(__name__)


class Classifier:

    def __init__(
        self,
        trig_cache,
        tolerance_t: float,
        tolerance_r: float,
        max_lines: int,
        use_distance_tolerance: bool = False,
    ):
        """
        Args:
            trig_cache: TrigCache of the engine (also gives the circumference)
            tolerance_t: angle tolerance, already in discretized units
            tolerance_r: distance tolerance in pixels; only consulted when
                use_distance_tolerance is True, otherwise the distance axis
                is compared against tolerance_t as well
            max_lines: cap on centers and on cells per center
        """
        self.trig_cache = trig_cache
        self.circumference = trig_cache.circumference
        self.semi_circumference = trig_cache.semi_circumference
        self.tolerance_t = tolerance_t
        self.tolerance_r = tolerance_r
        self.max_lines = max_lines
        self.use_distance_tolerance = use_distance_tolerance

        self.centers: List[Center] = []
        self.dropped = 0

    def __len__(self):
        return len(self.centers)

    # ------------------------------------------------------------
    # Nearest center
    # ------------------------------------------------------------
    def angle_distance(self, t1, t2):
        return angle_distance(t1, t2, self.circumference)

    def nearest(self, angle, distance) -> Optional[Tuple[int, float, float]]:
        """
        Returns (index, dt, dr) of the closest center, or None if there
        are no centers. Ties keep the earliest center.
        """
        best = None
        best_distance = None

        for i, center in enumerate(self.centers):
            dr = radius_distance(center.r, distance)
            dt = self.angle_distance(center.t, angle)
            d = max(dt, dr)
            if best_distance is None or d < best_distance:
                best = (i, dt, dr)
                best_distance = d

        return best

    # ------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------
    def classify(self, angle: int, distance: int) -> Optional[int]:
        """
        Assigns the cell (angle, distance) to a center.

        Returns the index of the center it went to, or None when the cell
        was dropped because of capacity.
        """
        nearest = self.nearest(angle, distance)
        tolerance_r = self.tolerance_r if self.use_distance_tolerance else self.tolerance_t

        if nearest is None or nearest[1] > self.tolerance_t or nearest[2] > tolerance_r:
            return self._new_center(angle, distance)

        return self._merge(nearest[0], angle, distance)

    def _new_center(self, angle, distance):
        if len(self.centers) >= self.max_lines:
            logger.warning("Classifier full (%d centers), dropping cell (%d, %d)",
                           self.max_lines, angle, distance)
            self.dropped += 1
            return None

        self.centers.append(Center.seed(angle, distance))
        logger.debug("New center #%d at (%d, %d)", len(self.centers) - 1, angle, distance)
        return len(self.centers) - 1

    def _merge(self, index, angle, distance):
        center = self.centers[index]

        # Too many cells per group. Skip.
        if center.size >= self.max_lines:
            logger.warning("Impossible to keep more cells for group %d, skipping cell (%d, %d)",
                           index, angle, distance)
            self.dropped += 1
            return None

        center.cells.append((angle, distance))

        angles = [t for t, _ in center.cells]
        center.r = sum(r for _, r in center.cells) / center.size
        center.t = circular_mean(angles, self.trig_cache)
        return index
