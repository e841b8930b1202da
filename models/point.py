import math
from dataclasses import dataclass, field
from typing import NamedTuple


class Point(NamedTuple):
    """
    Integer point with the origin moved to the image centre.
    """
    x: int
    y: int


@dataclass(frozen=True)
class Geometry:
    """
    Image size plus the derived diagonals that bound the distance axis
    of the accumulator.

        diagonal      = ceil(sqrt(width^2 + height^2))
        semi_diagonal = ceil(diagonal / 2)
    """

    width: int
    height: int
    diagonal: int = field(init=False)
    semi_diagonal: int = field(init=False)

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")

        diagonal = int(math.ceil(math.sqrt(self.width ** 2 + self.height ** 2)))
        # frozen dataclass: derived fields are set through object.__setattr__
        object.__setattr__(self, "diagonal", diagonal)
        object.__setattr__(self, "semi_diagonal", int(math.ceil(diagonal / 2.0)))

    @classmethod
    def from_size(cls, size):
        """Accepts a Geometry, or a (width, height) pair."""
        if isinstance(size, cls):
            return size
        width, height = size
        return cls(int(width), int(height))
