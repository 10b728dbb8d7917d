from dataclasses import replace

from identicon_generator.state import State
from identicon_generator.utils.color import pick_color


def color_system(state: State) -> State:
    return replace(state, color=pick_color(state.hex))
