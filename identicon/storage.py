"""Persistence of encoded identicons.

Images are written as ``<directory>/<identifier>.png``; an existing file with
the same identifier is overwritten.
"""

import logging
import os

from identicon.errors import PersistError

logger = logging.getLogger(__name__)

FILE_EXTENSION = ".png"


def image_path(identifier: str, directory: str = ".") -> str:
    """Return the target path for ``identifier`` inside ``directory``.

    Raises:
        PersistError: If the identifier is empty, ``.``/``..``, contains a NUL
            byte or contains a path separator.
    """
    if identifier in ("", ".", "..") or os.path.basename(identifier) != identifier:
        raise PersistError(f"Invalid image identifier: {identifier!r}")
    if "\x00" in identifier:
        raise PersistError(f"Invalid image identifier: {identifier!r}")
    if os.altsep is not None and os.altsep in identifier:
        raise PersistError(f"Invalid image identifier: {identifier!r}")
    return os.path.join(directory, identifier + FILE_EXTENSION)


def save_image(data: bytes, identifier: str, directory: str = ".") -> str:
    """Write ``data`` to ``<directory>/<identifier>.png`` and return the path.

    The directory is created when missing.

    Raises:
        PersistError: If the identifier is invalid or the write fails.
    """
    path = image_path(identifier, directory)
    try:
        os.makedirs(directory, exist_ok=True)
        with open(path, "wb") as fh:
            fh.write(data)
    except (OSError, ValueError) as exc:
        raise PersistError(f"Failed to write {path}: {exc}") from exc
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return path
