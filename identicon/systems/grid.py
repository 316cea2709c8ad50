"""Grid builder stage.

The seed is cut into 3 value chunks; each chunk becomes a horizontally
symmetric 5 cell row (``[a, b, c] -> [a, b, c, b, a]``). Rows are flattened
and every value is paired with its row-major position, giving 25
``(value, index)`` cells.
"""

from dataclasses import replace
from typing import List, Sequence, TypeVar
from pyrsistent import pvector

from identicon.image import ImageDescriptor
from identicon.types import CHUNK_SIZE, Cell, Stage
from identicon.utils.grid import chunk
from identicon.utils.stage import require_stage

T = TypeVar("T")


def mirror_row(row: Sequence[T]) -> List[T]:
    """Append element 1 then element 0 to ``row``.

    Example:
        >>> mirror_row([0, 1, 2])
        [0, 1, 2, 1, 0]
    """
    if len(row) < 2:
        raise ValueError(f"Row needs at least 2 values to mirror, got {len(row)}")
    first, second = row[0], row[1]
    return [*row, second, first]


def enumerate_cells(values: Sequence[int]) -> List[Cell]:
    """Pair each value with its 0-based position."""
    return [(value, index) for index, value in enumerate(values)]


def build_grid(image: ImageDescriptor) -> ImageDescriptor:
    """Expand the seed into the mirrored 5x5 grid of ``(value, index)`` cells."""
    require_stage(image, Stage.COLORED, "build_grid")
    values = [
        value
        for row in chunk(image.seed, CHUNK_SIZE)
        for value in mirror_row(row)
    ]
    return replace(image, grid=pvector(enumerate_cells(values)))
