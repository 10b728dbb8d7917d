"""Grid construction and cell selection.

The digest is read three bytes at a time; each chunk becomes a five cell row
mirrored around its middle element, so every identicon is left-right
symmetric. Cell indices are computed explicitly from ``(row, column)`` rather
than from iteration order.
"""

from typing import List, Sequence

from pyrsistent import pvector
from pyrsistent.typing import PVector

from identicon_generator.components import GridCell
from identicon_generator.types import CHUNK_SIZE, GRID_SIZE, Byte


def mirror_row(chunk: Sequence[Byte]) -> List[Byte]:
    """Append the first two elements in reverse: ``[a, b, c] -> [a, b, c, b, a]``."""
    if len(chunk) < 2:
        raise ValueError(f"Cannot mirror a row of {len(chunk)} elements")
    first, second = chunk[0], chunk[1]
    return [*chunk, second, first]


def chunk_rows(hex: Sequence[Byte]) -> List[List[Byte]]:
    """Split ``hex`` into full chunks of three, dropping any trailing partial chunk."""
    full = len(hex) - len(hex) % CHUNK_SIZE
    return [list(hex[i : i + CHUNK_SIZE]) for i in range(0, full, CHUNK_SIZE)]


def build_grid(hex: Sequence[Byte]) -> PVector[GridCell]:
    """Expand digest bytes into the mirrored, row-major indexed grid.

    With the standard 15 byte digest this yields exactly 25 cells. Shorter
    input yields fewer cells; nothing is padded.
    """
    cells: List[GridCell] = []
    for row, chunk in enumerate(chunk_rows(hex)):
        for column, value in enumerate(mirror_row(chunk)):
            cells.append(GridCell(value=value, index=row * GRID_SIZE + column))
    return pvector(cells)


def grid_rows(grid: Sequence[GridCell]) -> List[List[Byte]]:
    """Regroup a full grid's values into rows of five, for inspection."""
    return [
        [cell.value for cell in grid[i : i + GRID_SIZE]]
        for i in range(0, len(grid), GRID_SIZE)
    ]


def filter_even(grid: Sequence[GridCell]) -> PVector[GridCell]:
    """Keep cells with an even ``value``; relative order is preserved."""
    return pvector(cell for cell in grid if cell.value % 2 == 0)
