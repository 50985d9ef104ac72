"""File sink for encoded identicons.

The only place the package touches the filesystem. Errors from the write are
left to propagate to the caller unchanged.
"""

import logging
from pathlib import Path
from typing import Union

from identicon.config import FILE_SUFFIX

logger = logging.getLogger(__name__)


def image_path(input: str, directory: Union[str, Path] = ".") -> Path:
    """Return ``<directory>/<input>.png``; ``input`` is not sanitized."""
    return Path(directory) / f"{input}{FILE_SUFFIX}"


def save_image(image: bytes, input: str, directory: Union[str, Path] = ".") -> Path:
    """Write ``image`` to the file named after ``input``.

    Args:
        image (bytes): Encoded image.
        input (str): Original input string, used as the file stem.
        directory (str | Path): Target directory, the working directory by default.

    Returns:
        Path: Location of the written file.

    Raises:
        OSError: If the file cannot be written.
    """
    path = image_path(input, directory)
    path.write_bytes(image)
    logger.info("Wrote %d bytes to %s", len(image), path)
    return path
