"""
Reporting on the classifier.

This module provides:
    • extract_lines(classifier)
    • describe_classifier(classifier, precision)

Neither function mutates the classifier.
"""

from typing import List

from models.line import Line
from utils.geometry import to_radians, to_degrees


def extract_lines(classifier) -> List[Line]:
    """
    One Line per center: angle converted to radians, distance unchanged.
    """
    semi = classifier.semi_circumference
    return [Line(t=to_radians(c.t, semi), r=float(c.r)) for c in classifier.centers]


def describe_classifier(classifier, precision: int) -> str:
    """
    Human-readable dump of the classifier:

        (theta, radius) from # lines
        Parametric line: y = m*x + b

    Vertical lines (sin(theta) == 0) are printed as x = c instead.
    """
    blocks = []
    for center, line in zip(classifier.centers, extract_lines(classifier)):
        header = f"({to_degrees(center.t, precision):.2f}º, {center.r:.2f}) from {center.size} lines"
        if line.is_vertical:
            body = f"Vertical line: {line.equation()}"
        else:
            body = f"Parametric line: {line.equation()}"
        blocks.append(f"{header}\n{body}\n")

    return "\n".join(blocks)
