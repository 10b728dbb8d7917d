"""Immutable pipeline ``State`` record.

A single frozen :class:`State` is threaded through the pipeline systems. Each
system fills exactly one field and returns a *new* ``State``; nothing is
mutated in place, so any intermediate record can be kept, compared or
re-rendered.

Field lifecycle:

* ``input`` is set at construction.
* ``hex`` is filled by :func:`identicon_generator.systems.hash.hash_system`.
* ``color`` by :func:`identicon_generator.systems.color.color_system`.
* ``grid`` first holds all 25 mirrored cells
    (:func:`identicon_generator.systems.grid.grid_system`) and is then narrowed
    to the even cells (:func:`identicon_generator.systems.grid.filter_system`).
* ``pixel_map`` holds one rect per remaining cell
    (:func:`identicon_generator.systems.pixel.pixel_map_system`).
"""

from dataclasses import dataclass
from typing import Any, Optional

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from identicon_generator.components import Color, GridCell, PixelRect
from identicon_generator.types import Byte


@dataclass(frozen=True)
class State:
    """Pipeline record for one input string.

    Attributes:
        input (str): Source string.
        hex (PVector[int]): Truncated digest bytes.
        color (Color | None): Fill color, once picked.
        grid (PVector[GridCell]): Mirrored grid, or its even subset after filtering.
        pixel_map (PVector[PixelRect]): Canvas squares for the filled cells.
    """

    input: str
    hex: PVector[Byte] = pvector()
    color: Optional[Color] = None
    grid: PVector[GridCell] = pvector()
    pixel_map: PVector[PixelRect] = pvector()

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Empty vectors and unset values are skipped. Components are expanded to
        plain tuples so the result can be dumped as JSON after ``thaw``.

        Returns:
            PMap[str, Any]: Field name to value for every populated field.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None or (isinstance(value, type(pvector())) and not value):
                continue
            if isinstance(value, Color):
                value = value.as_tuple()
            elif field == "grid":
                value = pvector((cell.value, cell.index) for cell in value)
            elif field == "pixel_map":
                value = pvector(rect.as_tuple() for rect in value)
            description = description.set(field, value)
        return description
