"""Grid cell component.

A cell pairs a digest byte with its row-major position in the flattened 5×5
grid. Only the parity of ``value`` matters for rendering; ``index`` alone
decides where the cell is drawn.
"""

from dataclasses import dataclass

from identicon_generator.types import GRID_SIZE


@dataclass(frozen=True)
class GridCell:
    """One of the 25 grid cells.

    Attributes:
        value: Digest byte (0-255). Even values are filled.
        index: Row-major position (0-24).
    """

    value: int
    index: int

    @property
    def row(self) -> int:
        return self.index // GRID_SIZE

    @property
    def column(self) -> int:
        return self.index % GRID_SIZE

    @property
    def filled(self) -> bool:
        return self.value % 2 == 0
