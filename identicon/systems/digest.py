"""Input hashing system.

Entry stage of the pipeline: turns the input string into a fresh
:class:`ImageState` carrying the 16 byte MD5 digest. MD5 is used for its
fixed 128-bit output, not for any security property.
"""

import hashlib
import logging

from pyrsistent import pvector

from identicon.state import ImageState

logger = logging.getLogger(__name__)


def encode_input(input: str) -> bytes:
    """Encode ``input`` as UTF-8 without failing on lone surrogates.

    Surrogates produced by undecodable command line bytes (``surrogateescape``)
    turn back into those bytes; any other lone surrogate is kept as its
    UTF-8 style three byte sequence.
    """
    try:
        return input.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return input.encode("utf-8", "surrogatepass")


def hash_input(input: str) -> bytes:
    """Return the raw MD5 digest of ``encode_input(input)``."""
    return hashlib.md5(encode_input(input), usedforsecurity=False).digest()


def hash_system(input: str) -> ImageState:
    """Create the initial state for ``input``.

    Any string is accepted, including the empty string.

    Args:
        input (str): Arbitrary text to derive the identicon from.

    Returns:
        ImageState: New state with only ``digest`` populated.
    """
    digest = hash_input(input)
    logger.debug("Digest for %r: %s", input, digest.hex())
    return ImageState(digest=pvector(digest))
