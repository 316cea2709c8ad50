"""Pipeline orchestration.

Wires the five pure stages in their only valid order::

    hash_input -> pick_color -> build_grid -> filter_odd_squares -> build_pixel_map

:func:`build` returns the finished descriptor without touching any resource.
:func:`main` additionally renders the bitmap and persists it, which are the
only steps that may fail for environmental reasons
(:class:`identicon.errors.RenderError`, :class:`identicon.errors.PersistError`).
"""

import logging
from typing import Optional, Tuple, Union

from identicon.image import ImageDescriptor
from identicon.renderer.draw import IdenticonRenderer
from identicon.storage import save_image
from identicon.systems.color import pick_color
from identicon.systems.filter import filter_odd_squares
from identicon.systems.grid import build_grid
from identicon.systems.hash import hash_input
from identicon.systems.pixel_map import build_pixel_map
from identicon.types import StageFn

logger = logging.getLogger(__name__)

STAGES: Tuple[StageFn, ...] = (
    pick_color,
    build_grid,
    filter_odd_squares,
    build_pixel_map,
)


def build(input: Union[str, bytes]) -> ImageDescriptor:
    """Run every stage on ``input`` and return the ``MAPPED`` descriptor."""
    image = hash_input(input)
    for stage_fn in STAGES:
        image = stage_fn(image)
        logger.debug("%s -> %s", stage_fn.__name__, image.stage)
    return image


def main(
    input: str,
    output_dir: str = ".",
    identifier: Optional[str] = None,
    renderer: Optional[IdenticonRenderer] = None,
) -> str:
    """Generate the identicon for ``input`` and save it as a PNG.

    Args:
        input: Source string.
        output_dir: Directory the image is written to.
        identifier: File stem; defaults to ``input``.
        renderer: Renderer to use; a default :class:`IdenticonRenderer` if ``None``.

    Returns:
        str: Path of the written file.

    Raises:
        RenderError: Drawing or encoding failed.
        PersistError: The file could not be written.
    """
    image = build(input)
    data = (renderer or IdenticonRenderer()).render_png(image)
    path = save_image(data, input if identifier is None else identifier, output_dir)
    logger.info("Saved identicon for %r to %s", input, path)
    return path
