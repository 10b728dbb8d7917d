from typing import Sequence

from identicon_generator.components import Color


def pick_color(hex: Sequence[int]) -> Color:
    """Take the first three digest bytes as ``(r, g, b)``."""
    if len(hex) < 3:
        raise ValueError(f"Need at least 3 bytes to pick a color, got {len(hex)}")
    r, g, b = hex[0], hex[1], hex[2]
    return Color(r, g, b)
