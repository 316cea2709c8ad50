"""Common type aliases, constants and enumerations.

The pipeline geometry is fixed: a 16 byte MD5 seed is cut into 3 byte
chunks, each chunk is mirrored into a 5 cell row and the resulting 5x5 grid
is laid out on a 250x250 canvas of 50 pixel squares.
"""

from enum import StrEnum, auto
from typing import Callable, Tuple, TYPE_CHECKING


# Forward declaration for StageFn typing to avoid circular imports:
if TYPE_CHECKING:
    from identicon.image import ImageDescriptor

SEED_LENGTH = 16
CHUNK_SIZE = 3
GRID_SIZE = 5
CELL_SIZE = 50
CANVAS_SIZE = GRID_SIZE * CELL_SIZE

RGB = Tuple[int, int, int]
Cell = Tuple[int, int]  # (value, index)
Point = Tuple[int, int]  # (x, y)
Rect = Tuple[Point, Point]  # (top-left, bottom-right)

StageFn = Callable[["ImageDescriptor"], "ImageDescriptor"]


class Stage(StrEnum):
    """Lifecycle position of an image descriptor (strictly linear)."""

    SEEDED = auto()
    COLORED = auto()
    GRIDDED = auto()
    FILTERED = auto()
    MAPPED = auto()
