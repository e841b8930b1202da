"""
Parameter space accumulator.

A dense (angle, distance) grid. Each cell tracks:
    • count      distinct points that voted into it
    • processed  set once the cell has been handed to the classifier
    • voters     point indices already counted (one vote per point)

Counts and processed flags are numpy grids. Voters are hash sets created
on the first vote into a cell, instead of a flag array sized to the
number of points for every cell.
"""

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Set, Tuple

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cell:
    """Read-only snapshot of one accumulator cell."""

    angle: int
    distance: int
    count: int
    processed: bool
    voters: FrozenSet[int]


class Accumulator:

    def __init__(self, circumference: int, semi_diagonal: int, num_points: int, threshold: int):
        if threshold <= 0:
            raise ValueError(f"Threshold must be positive, got {threshold}")

        self.circumference = circumference
        self.semi_diagonal = semi_diagonal
        self.num_points = num_points
        self.threshold = threshold

        # distance == semi_diagonal is reachable by a rounded corner point
        self.shape = (circumference, semi_diagonal + 1)
        self._counts = np.zeros(self.shape, dtype=np.int32)
        self._processed = np.zeros(self.shape, dtype=bool)
        self._voters: Dict[Tuple[int, int], Set[int]] = {}

        logger.debug("Accumulator allocated: %d angles x %d distances", *self.shape)

    # ------------------------------------------------------------
    # Write path
    # ------------------------------------------------------------
    def vote(self, angle: int, distance: int, point_index: int) -> bool:
        """
        Count the vote of `point_index` for (angle, distance) unless the
        point already voted there.

        Returns True when the cell has reached the threshold and has not
        been processed yet.
        """
        self._check_key(angle, distance)
        if not 0 <= point_index < self.num_points:
            raise IndexError(f"Point index {point_index} out of range [0, {self.num_points})")

        voters = self._voters.get((angle, distance))
        if voters is None:
            voters = self._voters[(angle, distance)] = set()

        if point_index not in voters:
            voters.add(point_index)
            self._counts[angle, distance] += 1

        return bool(not self._processed[angle, distance]
                    and self._counts[angle, distance] >= self.threshold)

    def mark_processed(self, angle: int, distance: int):
        self._check_key(angle, distance)
        self._processed[angle, distance] = True

    # ------------------------------------------------------------
    # Read path
    # ------------------------------------------------------------
    def count(self, angle: int, distance: int) -> int:
        self._check_key(angle, distance)
        return int(self._counts[angle, distance])

    def is_processed(self, angle: int, distance: int) -> bool:
        self._check_key(angle, distance)
        return bool(self._processed[angle, distance])

    def has_voted(self, angle: int, distance: int, point_index: int) -> bool:
        self._check_key(angle, distance)
        return point_index in self._voters.get((angle, distance), ())

    def cell(self, angle: int, distance: int) -> Cell:
        self._check_key(angle, distance)
        return Cell(
            angle=angle,
            distance=distance,
            count=int(self._counts[angle, distance]),
            processed=bool(self._processed[angle, distance]),
            voters=frozenset(self._voters.get((angle, distance), ())),
        )

    @property
    def counts(self) -> np.ndarray:
        """Read-only view of the count grid, indexed [angle, distance]."""
        view = self._counts.view()
        view.flags.writeable = False
        return view

    @property
    def processed_count(self) -> int:
        return int(np.count_nonzero(self._processed))

    def _check_key(self, angle, distance):
        if not (0 <= angle < self.shape[0] and 0 <= distance < self.shape[1]):
            raise IndexError(
                f"Cell ({angle}, {distance}) outside accumulator of shape {self.shape}"
            )
