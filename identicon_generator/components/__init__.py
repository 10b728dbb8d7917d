"""Pipeline value components.

Immutable dataclasses passed between pipeline stages: the fill
:class:`Color`, the :class:`GridCell` pairs of the mirrored grid and the
:class:`PixelRect` squares they map to. Stages never modify a component; they
build new ones.
"""

from .cell import GridCell
from .color import Color
from .rect import PixelRect, Point

__all__ = [
    "Color",
    "GridCell",
    "PixelRect",
    "Point",
]
