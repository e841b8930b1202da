"""
Hough transform engine.

HoughTransform owns every data structure of one run:
    • TrigCache   sine / cosine tables
    • Accumulator (angle, distance) grid
    • Classifier  online clustering of cells into centers

USE: build it with the points and the image size, plot the points you
want with plot_point() / plot_points(), then read the result with
get_lines() or describe(). close() (or leaving a `with` block) releases
everything.
"""

import logging
from typing import Iterable, List, Optional

import numpy as np

from models.line import Line
from models.point import Geometry
from utils.trig_cache import TrigCache
from detectors.accumulator import Accumulator
from detectors.classifier import Classifier
from detectors.voting import cast_point
from detectors.reporting import extract_lines, describe_classifier

logger = logging.getLogger(__name__)

DEFAULT_MAX_LINES = 500


class HoughTransform:

    def __init__(
        self,
        points,
        size,
        threshold: int,
        tolerance_t: float,
        tolerance_r: float,
        precision: int = 1,
        max_lines: Optional[int] = None,
        use_distance_tolerance: bool = False,
    ):
        """
        Args:
            points: sequence of (x, y) integer points, origin at the image centre
            size: Geometry or (width, height) of the image
            threshold: votes needed to consider a cell a line candidate
            tolerance_t: tolerance (in degrees) to consider two lines the same
            tolerance_r: distance (in pixels) to consider two lines the same,
                only used with use_distance_tolerance=True
            precision: subdivisions per degree (10 = decimals, 100 = cents...)
            max_lines: lines to look for; None, 0 or negative falls back to 500
        """
        if precision <= 0:
            raise ValueError(f"Precision must be a positive integer, got {precision}")

        self.points = np.asarray(points, dtype=np.int64).reshape(-1, 2)
        self.geometry = Geometry.from_size(size)

        self.precision = int(precision)
        self.circumference = 360 * self.precision
        self.semi_circumference = 180 * self.precision

        self.threshold = threshold
        self.tolerance_t = tolerance_t * self.precision
        self.tolerance_r = tolerance_r
        self.max_lines = max_lines if max_lines and max_lines > 0 else DEFAULT_MAX_LINES

        self.trig_cache = TrigCache(self.circumference, self.semi_circumference)
        self.accumulator = Accumulator(
            self.circumference,
            self.geometry.semi_diagonal,
            len(self.points),
            threshold,
        )
        self.classifier = Classifier(
            self.trig_cache,
            self.tolerance_t,
            self.tolerance_r,
            self.max_lines,
            use_distance_tolerance=use_distance_tolerance,
        )
        self._closed = False

        logger.debug(
            "Hough setup: %d points, %dx%d image, precision %d, threshold %d, max_lines %d",
            len(self.points), self.geometry.width, self.geometry.height,
            self.precision, threshold, self.max_lines,
        )

    # ------------------------------------------------------------
    # Voting
    # ------------------------------------------------------------
    @property
    def num_points(self) -> int:
        return len(self.points)

    def plot_point(self, index: int):
        """
        Projects the point `index` over the accumulator.

        Returns the (angle, distance) cells it pushed over the threshold.
        """
        self._check_open()
        if not 0 <= index < self.num_points:
            raise IndexError(f"Point index {index} out of range [0, {self.num_points})")

        return cast_point(
            index,
            self.points[index],
            self.trig_cache,
            self.accumulator,
            self.classifier.classify,
        )

    def plot_points(self, indices: Optional[Iterable[int]] = None):
        """Plots every point, or only `indices`, in order."""
        if indices is None:
            indices = range(self.num_points)

        classified = []
        for index in indices:
            classified.extend(self.plot_point(index))
        return classified

    # ------------------------------------------------------------
    # Results
    # ------------------------------------------------------------
    def get_lines(self) -> List[Line]:
        self._check_open()
        return extract_lines(self.classifier)

    def describe(self) -> str:
        self._check_open()
        return describe_classifier(self.classifier, self.precision)

    def print_classifier(self):
        print(self.describe())

    # ------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------
    def close(self):
        """
        Frees the cache, the accumulator and the classifier.
        """
        self.trig_cache = None
        self.accumulator = None
        self.classifier = None
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _check_open(self):
        if self._closed:
            raise RuntimeError("HoughTransform has been closed")
