"""Grid math helpers.

Pure helpers shared by the grid builder and the pixel mapper. Cells are laid
out row-major on a ``GRID_SIZE`` x ``GRID_SIZE`` board.
"""

from typing import List, Sequence, TypeVar

from identicon.types import CELL_SIZE, GRID_SIZE, Point, Rect

T = TypeVar("T")


def chunk(values: Sequence[T], size: int) -> List[List[T]]:
    """Split ``values`` into contiguous chunks of ``size``.

    An incomplete trailing chunk is dropped, so 16 values with ``size=3``
    yield 5 chunks and the last value is discarded.
    """
    if size <= 0:
        raise ValueError(f"Chunk size must be positive, got {size}")
    return [
        list(values[start : start + size])
        for start in range(0, len(values) - size + 1, size)
    ]


def index_to_cell(index: int) -> Point:
    """Return ``(column, row)`` of a row-major grid index."""
    return index % GRID_SIZE, index // GRID_SIZE


def cell_rect(index: int) -> Rect:
    """Pixel rectangle ``((x0, y0), (x1, y1))`` covered by grid cell ``index``."""
    if not 0 <= index < GRID_SIZE * GRID_SIZE:
        raise ValueError(f"Grid index out of range: {index}")
    column, row = index_to_cell(index)
    x0, y0 = column * CELL_SIZE, row * CELL_SIZE
    return (x0, y0), (x0 + CELL_SIZE, y0 + CELL_SIZE)
