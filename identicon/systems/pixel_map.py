"""Pixel mapper stage.

Maps every visible cell's row-major index to the 50x50 square it occupies on
the 250x250 canvas::

    x0 = (index % 5) * 50      y0 = (index // 5) * 50
    x1 = x0 + 50               y1 = y0 + 50
"""

from dataclasses import replace
from pyrsistent import pvector

from identicon.image import ImageDescriptor
from identicon.types import Stage
from identicon.utils.grid import cell_rect
from identicon.utils.stage import require_stage


def build_pixel_map(image: ImageDescriptor) -> ImageDescriptor:
    """Attach one ``((x0, y0), (x1, y1))`` rectangle per visible cell, in grid order."""
    require_stage(image, Stage.FILTERED, "build_pixel_map")
    assert image.grid is not None
    pixel_map = pvector(cell_rect(index) for _, index in image.grid)
    return replace(image, pixel_map=pixel_map)
