import io
import logging

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw

from identicon.errors import RenderError
from identicon.image import ImageDescriptor
from identicon.types import CANVAS_SIZE, RGB, Stage
from identicon.utils.stage import require_stage

logger = logging.getLogger(__name__)

DEFAULT_BACKGROUND: RGB = (255, 255, 255)
DEFAULT_FORMAT = "PNG"

UInt8Array = npt.NDArray[np.uint8]


def render(
    image: ImageDescriptor,
    background: RGB = DEFAULT_BACKGROUND,
) -> Image.Image:
    """
    Draws every rectangle of ``image.pixel_map`` filled with ``image.rgb``.

    A rectangle ``((x0, y0), (x1, y1))`` covers the pixels ``[x0, x1) x [y0, y1)``,
    so each visible cell is exactly 50x50 pixels.
    """
    require_stage(image, Stage.MAPPED, "render")
    assert image.rgb is not None and image.pixel_map is not None

    try:
        img = Image.new("RGB", (CANVAS_SIZE, CANVAS_SIZE), background)
        draw = ImageDraw.Draw(img)
        for (x0, y0), (x1, y1) in image.pixel_map:
            draw.rectangle((x0, y0, x1 - 1, y1 - 1), fill=image.rgb)
    except (ValueError, TypeError, OSError) as exc:
        raise RenderError(f"Failed to draw identicon: {exc}") from exc

    logger.debug("Rendered %d cells with colour %s", len(image.pixel_map), image.rgb)
    return img


def encode_png(img: Image.Image) -> bytes:
    """Encode ``img`` as PNG bytes."""
    buffer = io.BytesIO()
    try:
        img.save(buffer, format=DEFAULT_FORMAT)
    except (ValueError, OSError) as exc:
        raise RenderError(f"Failed to encode identicon: {exc}") from exc
    return buffer.getvalue()


def to_array(img: Image.Image) -> UInt8Array:
    """Return the image as an ``(H, W, 3)`` uint8 array."""
    return np.asarray(img.convert("RGB"), dtype=np.uint8)


class IdenticonRenderer:
    background: RGB

    def __init__(self, background: RGB = DEFAULT_BACKGROUND):
        self.background = background

    def render(self, image: ImageDescriptor) -> Image.Image:
        return render(image, background=self.background)

    def render_png(self, image: ImageDescriptor) -> bytes:
        return encode_png(self.render(image))

    def render_array(self, image: ImageDescriptor) -> UInt8Array:
        return to_array(self.render(image))
