"""Colour picker stage."""

from dataclasses import replace

from identicon.image import ImageDescriptor
from identicon.types import Stage
from identicon.utils.stage import require_stage


def pick_color(image: ImageDescriptor) -> ImageDescriptor:
    """Use the first three seed bytes as the ``(r, g, b)`` fill colour.

    Example:
        >>> from identicon.systems.hash import hash_input
        >>> pick_color(hash_input("Chris")).rgb
        (148, 79, 172)
    """
    require_stage(image, Stage.SEEDED, "pick_color")
    r, g, b = image.seed[0], image.seed[1], image.seed[2]
    return replace(image, rgb=(r, g, b))
