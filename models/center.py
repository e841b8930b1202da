from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class Center:
    """
    A cluster of accumulator cells representing one detected line.

    `t` is the circular mean of the member angles (discretized units,
    normalised into [0, circumference)) and `r` the linear mean of the
    member distances. Members are kept as (angle, distance) keys into
    the accumulator, in classification order.
    """

    t: float
    r: float
    cells: List[Tuple[int, int]] = field(default_factory=list)

    @classmethod
    def seed(cls, angle: int, distance: int) -> "Center":
        return cls(t=float(angle), r=float(distance), cells=[(angle, distance)])

    @property
    def size(self) -> int:
        return len(self.cells)

    def __repr__(self):
        return f"Center(t={self.t:.2f}, r={self.r:.2f}, cells={self.size})"
