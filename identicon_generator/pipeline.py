"""Pipeline orchestration.

Wires the systems together in their only valid order and exposes the public
entry points:

1. ``hash_system`` fills ``hex`` from ``input``.
2. ``color_system`` picks the fill color from ``hex[0:3]``.
3. ``grid_system`` builds the 25 mirrored cells.
4. ``filter_system`` keeps the even cells.
5. ``pixel_map_system`` maps them to canvas squares.

:func:`generate` then rasterizes the final ``State``; :func:`generate_and_save`
additionally hands the buffer to an :class:`~identicon_generator.writer.ImageWriter`.
Every step is pure and no state is shared between calls.
"""

import logging
from typing import Callable, List, Optional

from identicon_generator.config import DEFAULT_CONFIG, IdenticonConfig
from identicon_generator.renderer.raster import RasterRenderer
from identicon_generator.state import State
from identicon_generator.systems.color import color_system
from identicon_generator.systems.grid import filter_system, grid_system
from identicon_generator.systems.hash import hash_system
from identicon_generator.systems.pixel import pixel_map_system
from identicon_generator.types import ImageBuffer
from identicon_generator.writer import ImageWriter, SaveResult

logger = logging.getLogger(__name__)

SystemFn = Callable[[State], State]

PIPELINE: List[SystemFn] = [
    hash_system,
    color_system,
    grid_system,
    filter_system,
    pixel_map_system,
]


def generate_state(input: str) -> State:
    """Run every pipeline system over ``input``.

    Returns:
        State: Fully populated record (``hex``, ``color``, filtered ``grid``,
            ``pixel_map``).

    Raises:
        InputEncodingError: If ``input`` cannot be encoded for hashing.
    """
    state = State(input=input)
    for system in PIPELINE:
        state = system(state)
        logger.debug("%s(%r) done", system.__name__, input)
    return state


def generate(input: str, config: Optional[IdenticonConfig] = None) -> ImageBuffer:
    """Return the rendered 250×250 identicon for ``input``."""
    config = config or DEFAULT_CONFIG
    state = generate_state(input)
    logger.debug(
        "Rendering %r: color=%s, %d filled cells",
        input,
        state.color,
        len(state.grid),
    )
    return RasterRenderer(background=config.background).render(state)


def generate_and_save(
    input: str,
    config: Optional[IdenticonConfig] = None,
    writer: Optional[ImageWriter] = None,
) -> SaveResult:
    """Render ``input`` and save it as ``<output_dir>/<input>.<extension>``.

    Args:
        input: Source string; also used as the file name, unsanitized. Names
            containing ``/`` or ``..`` resolve outside ``output_dir`` and
            missing directories are created for them.
        config: Background, format and output directory. Defaults to
            :data:`~identicon_generator.config.DEFAULT_CONFIG`.
        writer: Writer to use instead of one built from ``config``.

    Returns:
        SaveResult: Success flag, rendered image and path or error.

    Raises:
        InputEncodingError: If ``input`` cannot be encoded for hashing.
    """
    config = config or DEFAULT_CONFIG
    writer = writer or ImageWriter(config)
    image = generate(input, config)
    return writer.encode_and_persist(image, input)
