"""Output configuration.

The algorithm's geometry is fixed (see :mod:`identicon_generator.types`); what
can vary is how the finished canvas is presented and stored: the background
of unfilled pixels, the container format and the output directory.

The default background is fully transparent black, the closest stable
equivalent of an uninitialized canvas. Fill colors are always opaque, so a
filled pixel can never equal the default background.
"""

from dataclasses import dataclass

from identicon_generator.types import RGBA

DEFAULT_BACKGROUND: RGBA = (0, 0, 0, 0)
DEFAULT_IMAGE_FORMAT = "png"
DEFAULT_OUTPUT_DIR = "."


@dataclass(frozen=True)
class IdenticonConfig:
    """Presentation and storage settings.

    Attributes:
        background: RGBA value of every pixel outside a filled cell.
        image_format: Key into :data:`identicon_generator.writer.ENCODER_REGISTRY`.
        output_dir: Directory that saved images are written to.
    """

    background: RGBA = DEFAULT_BACKGROUND
    image_format: str = DEFAULT_IMAGE_FORMAT
    output_dir: str = DEFAULT_OUTPUT_DIR

    @property
    def extension(self) -> str:
        return self.image_format.lower()


DEFAULT_CONFIG = IdenticonConfig()


def parse_color(text: str) -> RGBA:
    """Parse ``#RRGGBB`` or ``#RRGGBBAA`` into an RGBA tuple.

    The leading ``#`` is optional. Six-digit values are treated as opaque.

    Raises:
        ValueError: If ``text`` is not 6 or 8 hexadecimal digits.
    """
    digits = text.strip().removeprefix("#")
    if len(digits) not in (6, 8):
        raise ValueError(f"Expected #RRGGBB or #RRGGBBAA, got {text!r}")
    try:
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
    except ValueError as exc:
        raise ValueError(f"Invalid hex color: {text!r}") from exc
    if len(channels) == 3:
        channels.append(255)
    r, g, b, a = channels
    return (r, g, b, a)
