"""Grid systems.

``grid_system`` expands the digest into the full 25 cell mirrored grid;
``filter_system`` then narrows ``State.grid`` to the cells that will be
filled. The two run back to back and must not be reordered.
"""

from dataclasses import replace

from identicon_generator.state import State
from identicon_generator.utils.grid import build_grid, filter_even


def grid_system(state: State) -> State:
    """Populate ``grid`` with every mirrored cell of ``hex``.

    Args:
        state (State): State with ``hex`` populated.

    Returns:
        State: New state whose ``grid`` holds ``len(hex) // 3 * 5`` cells.
    """
    return replace(state, grid=build_grid(state.hex))


def filter_system(state: State) -> State:
    """Drop odd-valued cells from ``grid``."""
    return replace(state, grid=filter_even(state.grid))
