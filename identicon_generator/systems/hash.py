"""Hashing system.

Seeds the pipeline: fills ``State.hex`` from ``State.input``. This is the only
system that can fail at runtime (:class:`~identicon_generator.errors.InputEncodingError`).
"""

from dataclasses import replace

from identicon_generator.state import State
from identicon_generator.utils.hash import hash_input


def hash_system(state: State) -> State:
    """Return a new state with ``hex`` set to the truncated digest of ``input``."""
    return replace(state, hex=hash_input(state.input))
