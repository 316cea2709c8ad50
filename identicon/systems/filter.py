"""Odd filter stage."""

from dataclasses import replace
from pyrsistent import pvector

from identicon.image import ImageDescriptor
from identicon.types import Stage
from identicon.utils.stage import require_stage


def is_visible(value: int) -> bool:
    """Cells with an even value are drawn."""
    return value % 2 == 0


def filter_odd_squares(image: ImageDescriptor) -> ImageDescriptor:
    """Drop odd-valued cells from the grid.

    Relative order and the original indices of the remaining cells are kept;
    indices are not renumbered, the pixel mapper needs the grid position.
    """
    require_stage(image, Stage.GRIDDED, "filter_odd_squares")
    assert image.grid is not None
    grid = pvector(cell for cell in image.grid if is_visible(cell[0]))
    return replace(image, grid=grid, filtered=True)
