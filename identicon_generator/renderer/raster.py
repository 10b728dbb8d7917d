"""Rasterizer.

Fills half-open pixel rectangles with a solid color on a fixed-size canvas.
Rectangles produced by :func:`identicon_generator.utils.pixel.map_to_pixels`
never overlap, so paint order does not affect the result.
"""

from typing import Optional, Sequence

import numpy as np
import numpy.typing as npt
from PIL import Image

from identicon_generator.components import Color, PixelRect
from identicon_generator.config import DEFAULT_BACKGROUND
from identicon_generator.state import State
from identicon_generator.types import CANVAS_SIZE, RGBA, ImageBuffer

UInt8Array = npt.NDArray[np.uint8]


def new_canvas(
    background: RGBA = DEFAULT_BACKGROUND, size: int = CANVAS_SIZE
) -> UInt8Array:
    """Return a ``(size, size, 4)`` array with every pixel set to ``background``."""
    canvas: UInt8Array = np.empty((size, size, 4), dtype=np.uint8)
    canvas[...] = np.asarray(background, dtype=np.uint8)
    return canvas


def fill_rect(canvas: UInt8Array, rect: PixelRect, rgba: RGBA) -> None:
    """Paint ``rect`` onto ``canvas`` in place.

    Covers ``x`` in ``[top_left.x, bottom_right.x)`` and ``y`` in
    ``[top_left.y, bottom_right.y)``.

    Raises:
        ValueError: If ``rect`` extends beyond the canvas.
    """
    height, width = canvas.shape[:2]
    x0, y0 = rect.top_left.x, rect.top_left.y
    x1, y1 = rect.bottom_right.x, rect.bottom_right.y
    if not (0 <= x0 <= x1 <= width and 0 <= y0 <= y1 <= height):
        raise ValueError(f"Rect {rect.as_tuple()} outside {width}x{height} canvas")
    canvas[y0:y1, x0:x1] = np.asarray(rgba, dtype=np.uint8)


def draw(
    color: Color,
    rects: Sequence[PixelRect],
    background: RGBA = DEFAULT_BACKGROUND,
) -> ImageBuffer:
    """Rasterize ``rects`` filled with opaque ``color`` onto a fresh canvas.

    Args:
        color: Fill color for every rect.
        rects: Squares to fill.
        background: RGBA value of the untouched pixels.

    Returns:
        ImageBuffer: New 250×250 RGBA image.
    """
    canvas = new_canvas(background)
    rgba = color.as_rgba()
    for rect in rects:
        fill_rect(canvas, rect, rgba)
    return Image.fromarray(canvas)


def image_to_array(image: ImageBuffer) -> UInt8Array:
    """Return the image pixels as a ``(H, W, 4)`` ``uint8`` array."""
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return np.array(image, dtype=np.uint8)


class RasterRenderer:
    """Renders a completed pipeline ``State`` onto a fixed background.

    Attributes:
        background: RGBA value of every unfilled pixel.
    """

    background: RGBA

    def __init__(self, background: Optional[RGBA] = None):
        self.background = background if background is not None else DEFAULT_BACKGROUND

    def render(self, state: State) -> ImageBuffer:
        if state.color is None:
            raise ValueError("State has no color; run color_system first")
        return draw(state.color, state.pixel_map, background=self.background)
