import math
from dataclasses import dataclass

# |sin(t)| below this is treated as a vertical line
VERTICAL_EPSILON = 1e-9


@dataclass(frozen=True)
class Line:
    """
    A detected line in normal form:

        x * cos(t) + y * sin(t) = r

    with `t` in RADIANS and the origin at the image centre.

    Supports:
      - slope / intercept of the equivalent y = m*x + b
      - vertical-line special case (x = constant) when sin(t) == 0
      - evaluation at a given x
      - distance from a point to the (infinite) line
    """

    t: float
    r: float

    # ------------------------------------------------------------
    # Basic geometric properties
    # ------------------------------------------------------------
    @property
    def is_vertical(self) -> bool:
        return abs(math.sin(self.t)) < VERTICAL_EPSILON

    @property
    def slope(self) -> float:
        """
        m = -cos(t) / sin(t). Vertical lines return math.inf.
        """
        if self.is_vertical:
            return math.inf
        return -math.cos(self.t) / math.sin(self.t)

    @property
    def intercept(self) -> float:
        """
        b = r / sin(t). Vertical lines return math.inf.
        """
        if self.is_vertical:
            return math.inf
        return self.r / math.sin(self.t)

    @property
    def x_position(self) -> float:
        """
        x = r / cos(t), only meaningful for vertical lines.
        """
        return self.r / math.cos(self.t)

    @property
    def degrees(self) -> float:
        return math.degrees(self.t)

    # ------------------------------------------------------------
    # Evaluation & distance
    # ------------------------------------------------------------
    def y_at(self, x: float) -> float:
        if self.is_vertical:
            raise ValueError(f"Vertical line x = {self.x_position:.2f} has no single y at x = {x}")
        return self.slope * x + self.intercept

    def distance_from_point(self, point) -> float:
        """
        Perpendicular distance using the normal form directly, which is
        well defined for vertical lines too.
        """
        x0, y0 = point
        return abs(x0 * math.cos(self.t) + y0 * math.sin(self.t) - self.r)

    def equation(self) -> str:
        if self.is_vertical:
            return f"x = {self.x_position:.2f}"
        return f"y = {self.slope:.2f}*x+{self.intercept:.2f}"

    # ------------------------------------------------------------
    # Repr
    # ------------------------------------------------------------
    def __repr__(self):
        return f"Line(t={self.degrees:.2f}deg, r={self.r:.2f}, {self.equation()})"
