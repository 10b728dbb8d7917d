"""Common type aliases and fixed algorithm constants.

The geometry is not configurable: a 5×5 grid of 50 pixel cells on a 250 pixel
canvas, built from 15 digest bytes consumed three at a time.
"""

from typing import Callable, Tuple

from PIL.Image import Image
from pyrsistent.typing import PVector

GRID_SIZE = 5
CELL_SIZE = 50
CANVAS_SIZE = GRID_SIZE * CELL_SIZE
CHUNK_SIZE = 3
HASH_LENGTH = 15

Byte = int
HashedInput = PVector[Byte]
RGBA = Tuple[int, int, int, int]
ImageBuffer = Image

EncodeFn = Callable[[ImageBuffer], bytes]
