# tests/unit/test_grid.py

import pytest

from identicon_generator.components import GridCell
from identicon_generator.types import GRID_SIZE
from identicon_generator.utils.grid import (
    build_grid,
    chunk_rows,
    filter_even,
    grid_rows,
    mirror_row,
)
from identicon_generator.utils.hash import hash_input
from tests.test_utils import (
    ALL_ODD_HEX,
    HAYDEN_FILLED_INDICES,
    HAYDEN_GRID,
    HAYDEN_HEX,
    SAMPLE_INPUTS,
)


@pytest.mark.parametrize(
    "chunk, expected",
    [
        ([1, 2, 3], [1, 2, 3, 2, 1]),
        ([148, 180, 14], [148, 180, 14, 180, 148]),
        ([0, 0, 7], [0, 0, 7, 0, 0]),
        ([5, 6], [5, 6, 6, 5]),
    ],
)
def test_mirror_row(chunk: list[int], expected: list[int]) -> None:
    assert mirror_row(chunk) == expected


def test_mirror_row_does_not_modify_chunk() -> None:
    chunk = [1, 2, 3]
    mirror_row(chunk)
    assert chunk == [1, 2, 3]


@pytest.mark.parametrize("chunk", [[], [1]])
def test_mirror_row_rejects_short_chunk(chunk: list[int]) -> None:
    with pytest.raises(ValueError):
        mirror_row(chunk)


def test_chunk_rows_drops_partial_chunk() -> None:
    assert chunk_rows([1, 2, 3, 4, 5, 6, 7]) == [[1, 2, 3], [4, 5, 6]]
    assert chunk_rows([1, 2]) == []


def test_build_grid_known_value() -> None:
    grid = build_grid(HAYDEN_HEX)
    assert [(cell.value, cell.index) for cell in grid] == HAYDEN_GRID


def test_build_grid_short_input_is_not_padded() -> None:
    grid = build_grid([10, 11, 12, 13, 14, 15, 16])
    assert [(c.value, c.index) for c in grid] == [
        (10, 0), (11, 1), (12, 2), (11, 3), (10, 4),
        (13, 5), (14, 6), (15, 7), (14, 8), (13, 9),
    ]  # fmt: skip


@pytest.mark.parametrize("text", SAMPLE_INPUTS)
def test_build_grid_rows_are_palindromes(text: str) -> None:
    grid = build_grid(hash_input(text))
    assert len(grid) == GRID_SIZE * GRID_SIZE
    rows = grid_rows(grid)
    assert len(rows) == GRID_SIZE
    for row in rows:
        assert len(row) == GRID_SIZE
        assert row == row[::-1]


@pytest.mark.parametrize("text", SAMPLE_INPUTS)
def test_build_grid_indices_are_row_major(text: str) -> None:
    grid = build_grid(hash_input(text))
    assert [cell.index for cell in grid] == list(range(25))
    for cell in grid:
        assert cell.row * GRID_SIZE + cell.column == cell.index


def test_filter_even_known_value() -> None:
    filtered = filter_even(build_grid(HAYDEN_HEX))
    assert len(filtered) == 13
    assert [cell.index for cell in filtered] == HAYDEN_FILLED_INDICES
    assert all(cell.filled for cell in filtered)


@pytest.mark.parametrize("text", SAMPLE_INPUTS)
def test_filter_even_partitions_grid(text: str) -> None:
    grid = build_grid(hash_input(text))
    filtered = filter_even(grid)
    kept = set(filtered)
    assert all(cell.value % 2 == 0 for cell in filtered)
    assert all(cell.value % 2 == 1 for cell in grid if cell not in kept)
    # order-preserving subsequence of the grid
    assert [cell for cell in grid if cell in kept] == list(filtered)


def test_filter_even_all_odd_is_empty() -> None:
    assert len(filter_even(build_grid(ALL_ODD_HEX))) == 0


def test_grid_cell_row_and_column() -> None:
    cell = GridCell(value=194, index=7)
    assert (cell.row, cell.column) == (1, 2)
    assert cell.filled
    assert not GridCell(value=245, index=6).filled
