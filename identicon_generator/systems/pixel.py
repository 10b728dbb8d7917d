from dataclasses import replace

from identicon_generator.state import State
from identicon_generator.utils.pixel import map_to_pixels


def pixel_map_system(state: State) -> State:
    """Populate ``pixel_map`` with one canvas square per remaining grid cell."""
    return replace(state, pixel_map=map_to_pixels(state.grid))
