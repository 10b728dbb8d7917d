"""Deterministic 5×5 identicon generation.

The pipeline hashes an input string, picks a fill color from the digest,
mirrors the digest into a symmetric grid, keeps the even cells and rasterizes
them as 50×50 squares on a 250×250 canvas. See :mod:`identicon_generator.pipeline`
for the public entry points.
"""

from identicon_generator.config import DEFAULT_CONFIG, IdenticonConfig
from identicon_generator.errors import (
    IdenticonError,
    InputEncodingError,
    PersistenceError,
)
from identicon_generator.pipeline import generate, generate_and_save, generate_state
from identicon_generator.state import State
from identicon_generator.writer import ImageWriter, SaveResult

__all__ = [
    "DEFAULT_CONFIG",
    "IdenticonConfig",
    "IdenticonError",
    "ImageWriter",
    "InputEncodingError",
    "PersistenceError",
    "SaveResult",
    "State",
    "generate",
    "generate_and_save",
    "generate_state",
]
