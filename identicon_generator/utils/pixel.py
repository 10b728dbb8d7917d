"""Grid index to canvas rectangle mapping."""

from typing import Sequence

from pyrsistent import pvector
from pyrsistent.typing import PVector

from identicon_generator.components import GridCell, PixelRect, Point
from identicon_generator.types import CELL_SIZE, GRID_SIZE


def index_to_rect(index: int) -> PixelRect:
    """Return the 50×50 square for grid ``index``.

    Raises:
        ValueError: If ``index`` is outside 0-24.
    """
    if not 0 <= index < GRID_SIZE * GRID_SIZE:
        raise ValueError(f"Grid index out of range: {index}")
    horizontal = (index % GRID_SIZE) * CELL_SIZE
    vertical = (index // GRID_SIZE) * CELL_SIZE
    return PixelRect(
        top_left=Point(horizontal, vertical),
        bottom_right=Point(horizontal + CELL_SIZE, vertical + CELL_SIZE),
    )


def map_to_pixels(cells: Sequence[GridCell]) -> PVector[PixelRect]:
    """Map each cell to its canvas square, in input order. ``value`` is ignored."""
    return pvector(index_to_rect(cell.index) for cell in cells)
