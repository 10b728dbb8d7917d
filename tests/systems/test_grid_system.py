# tests/systems/test_grid_system.py

from identicon_generator.systems.grid import filter_system, grid_system
from identicon_generator.systems.pixel import pixel_map_system
from tests.test_utils import (
    ALL_ODD_HEX,
    HAYDEN_FILLED_INDICES,
    HAYDEN_GRID,
    HAYDEN_HEX,
    make_hashed_state,
)


def test_grid_system_builds_full_grid() -> None:
    state = grid_system(make_hashed_state(HAYDEN_HEX))
    assert [(c.value, c.index) for c in state.grid] == HAYDEN_GRID


def test_filter_system_narrows_grid() -> None:
    built = grid_system(make_hashed_state(HAYDEN_HEX))
    filtered = filter_system(built)
    assert [c.index for c in filtered.grid] == HAYDEN_FILLED_INDICES
    assert len(built.grid) == 25


def test_pixel_map_system() -> None:
    state = pixel_map_system(filter_system(grid_system(make_hashed_state(HAYDEN_HEX))))
    assert len(state.pixel_map) == 13
    assert state.pixel_map[0].as_tuple() == ((0, 0), (50, 50))
    assert state.pixel_map[5].as_tuple() == ((100, 0), (150, 50))  # index 7
    assert state.pixel_map[10].as_tuple() == ((0, 200), (50, 250))  # index 20
    assert [r.as_tuple() for r in state.pixel_map] == [
        ((0, 0), (50, 50)),
        ((50, 0), (100, 50)),
        ((100, 0), (150, 50)),
        ((150, 0), (200, 50)),
        ((200, 0), (250, 50)),
        ((100, 50), (150, 100)),
        ((100, 100), (150, 150)),
        ((50, 150), (100, 200)),
        ((100, 150), (150, 200)),
        ((150, 150), (200, 200)),
        ((0, 200), (50, 250)),
        ((100, 200), (150, 250)),
        ((200, 200), (250, 250)),
    ]


def test_all_odd_hex_yields_no_cells() -> None:
    state = pixel_map_system(filter_system(grid_system(make_hashed_state(ALL_ODD_HEX))))
    assert len(state.grid) == 0
    assert len(state.pixel_map) == 0
