"""Encoder / writer boundary.

The pipeline itself never touches the filesystem. This module owns the two
steps that do: encoding an :data:`~identicon_generator.types.ImageBuffer` into
a container format with Pillow, and writing the bytes to
``<output_dir>/<name>.<extension>``.

Contract (``EncodeFn``):

* Takes a finished RGBA buffer and returns the encoded bytes.
* Must not modify the buffer.
"""

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from identicon_generator.config import DEFAULT_CONFIG, IdenticonConfig
from identicon_generator.errors import PersistenceError
from identicon_generator.types import EncodeFn, ImageBuffer

logger = logging.getLogger(__name__)


def _pillow_encoder(pillow_format: str, **params: object) -> EncodeFn:
    def encode(buffer: ImageBuffer) -> bytes:
        out = io.BytesIO()
        buffer.save(out, format=pillow_format, **params)
        return out.getvalue()

    return encode


ENCODER_REGISTRY: Dict[str, EncodeFn] = {
    "png": _pillow_encoder("PNG", optimize=True),
    "bmp": _pillow_encoder("BMP"),
    "gif": _pillow_encoder("GIF"),
    "tiff": _pillow_encoder("TIFF"),
    "webp": _pillow_encoder("WEBP", lossless=True),
}
"""Supported output formats by lowercase name.

Only ``png`` and ``webp`` keep the transparent default background exactly;
the other formats flatten or palettize alpha.
"""


def get_encoder(image_format: str) -> EncodeFn:
    try:
        return ENCODER_REGISTRY[image_format.lower()]
    except KeyError:
        raise ValueError(
            f"Unsupported image format {image_format!r}; "
            f"expected one of {sorted(ENCODER_REGISTRY)}"
        ) from None


def encode_image(buffer: ImageBuffer, image_format: str = "png") -> bytes:
    """Encode ``buffer`` as ``image_format`` bytes."""
    return get_encoder(image_format)(buffer)


def persist_bytes(
    data: bytes, name: str, directory: str = ".", extension: str = "png"
) -> Path:
    """Write ``data`` to ``<directory>/<name>.<extension>``.

    The directory is created if missing; an existing file is overwritten.

    Returns:
        Path: The written file.

    Raises:
        PersistenceError: If the directory or file cannot be written, or
            ``name`` is not a usable file name (e.g. contains a NUL byte).
    """
    path = Path(directory) / f"{name}.{extension}"
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except (OSError, ValueError) as exc:
        raise PersistenceError(f"Failed to write {path}: {exc}", path=path) from exc
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return path


@dataclass(frozen=True)
class SaveResult:
    """Outcome of one encode-and-persist attempt.

    On failure ``image`` is still the valid rendered buffer, so the write can
    be retried without re-running the pipeline.

    Attributes:
        ok: True if the file was written.
        image: Rendered buffer that was (or failed to be) saved.
        path: Written file, on success.
        error: The persistence failure, otherwise ``None``.
    """

    ok: bool
    image: ImageBuffer
    path: Optional[Path] = None
    error: Optional[PersistenceError] = None

    def __bool__(self) -> bool:
        return self.ok


class ImageWriter:
    """Encodes buffers in the configured format and writes them to ``output_dir``.

    Both encoding and writing failures are reported as
    :class:`~identicon_generator.errors.PersistenceError`.
    """

    config: IdenticonConfig
    encoder: EncodeFn

    def __init__(self, config: Optional[IdenticonConfig] = None):
        self.config = config or DEFAULT_CONFIG
        # fail on an unknown format before anything is rendered
        self.encoder = get_encoder(self.config.image_format)

    def encode(self, buffer: ImageBuffer) -> bytes:
        try:
            return self.encoder(buffer)
        except (OSError, ValueError) as exc:
            raise PersistenceError(
                f"Failed to encode image as {self.config.image_format}: {exc}"
            ) from exc

    def persist(self, data: bytes, name: str) -> Path:
        return persist_bytes(
            data,
            name,
            directory=self.config.output_dir,
            extension=self.config.extension,
        )

    def encode_and_persist(self, buffer: ImageBuffer, name: str) -> SaveResult:
        """Encode and write ``buffer``; report a failure instead of raising."""
        try:
            path = self.persist(self.encode(buffer), name)
        except PersistenceError as exc:
            logger.error("Could not save identicon %r: %s", name, exc)
            return SaveResult(ok=False, image=buffer, path=exc.path, error=exc)
        logger.info("Saved identicon %r to %s", name, path)
        return SaveResult(ok=True, image=buffer, path=path)
