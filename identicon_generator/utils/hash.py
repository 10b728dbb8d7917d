"""Input hashing.

MD5 is used purely as a deterministic byte generator; nothing here relies on
its cryptographic properties.
"""

import hashlib

from pyrsistent import pvector

from identicon_generator.errors import InputEncodingError
from identicon_generator.types import HASH_LENGTH, HashedInput


def encode_input(input: str) -> bytes:
    """Return the UTF-8 bytes of ``input``.

    Raises:
        TypeError: If ``input`` is not a ``str``.
        InputEncodingError: If ``input`` holds code points UTF-8 cannot
            represent (e.g. lone surrogates).
    """
    if not isinstance(input, str):
        raise TypeError(f"Expected str input, got {type(input).__name__}")
    try:
        return input.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InputEncodingError(f"Cannot encode input {input!r}: {exc}") from exc


def hash_input(input: str) -> HashedInput:
    """Hash ``input`` into the first 15 bytes of its MD5 digest.

    Args:
        input: Arbitrary string.

    Returns:
        HashedInput: 15 ints in 0-255, in digest order.
    """
    digest = hashlib.md5(encode_input(input), usedforsecurity=False).digest()
    return pvector(digest[:HASH_LENGTH])
