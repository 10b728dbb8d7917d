"""Exceptions raised by the identicon pipeline.

Only two runtime failures exist: the input string cannot be turned into bytes
for hashing, or the encoded image cannot be written. Every other stage is a
total function over a well-formed digest; violating its preconditions raises
a plain ``ValueError``.
"""

from pathlib import Path
from typing import Optional


class IdenticonError(Exception):
    """Base class for identicon pipeline errors."""


class InputEncodingError(IdenticonError, ValueError):
    """The input string cannot be encoded to bytes for hashing."""


class PersistenceError(IdenticonError, OSError):
    """The encoded image could not be written.

    Attributes:
        path: Target file path, when known.
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path
