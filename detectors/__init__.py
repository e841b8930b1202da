"""
Detectors Package

Contains the Hough transform engine and its parts:
- Accumulator
- Point voting
- Online classifier
- Reporting
"""

from .accumulator import Accumulator, Cell
from .voting import project_point, cast_point
from .classifier import Classifier
from .reporting import extract_lines, describe_classifier
from .hough_engine import HoughTransform, DEFAULT_MAX_LINES

__all__ = [
    "Accumulator",
    "Cell",
    "project_point",
    "cast_point",
    "Classifier",
    "extract_lines",
    "describe_classifier",
    "HoughTransform",
    "DEFAULT_MAX_LINES",
]
