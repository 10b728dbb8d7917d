"""Fill color component."""

from dataclasses import dataclass
from typing import Tuple

from identicon_generator.types import RGBA


@dataclass(frozen=True)
class Color:
    """Solid RGB fill color.

    Attributes:
        r: Red channel (0-255).
        g: Green channel (0-255).
        b: Blue channel (0-255).
    """

    r: int
    g: int
    b: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def as_rgba(self, alpha: int = 255) -> RGBA:
        return (self.r, self.g, self.b, alpha)
