import io

import numpy as np
import pytest
from PIL import Image

from identicon.errors import RenderError, StagePreconditionError
from identicon.pipeline import build
from identicon.renderer.draw import (
    DEFAULT_BACKGROUND,
    IdenticonRenderer,
    encode_png,
    render,
    to_array,
)
from identicon.systems.hash import hash_input

CHRIS_RGB = (148, 79, 172)


def test_render_canvas_size() -> None:
    img = render(build("Chris"))
    assert img.size == (250, 250)
    assert img.mode == "RGB"


def test_render_fills_visible_cells() -> None:
    pixels = to_array(render(build("Chris")))
    assert pixels.shape == (250, 250, 3)
    assert pixels.dtype == np.uint8
    # cell 0 (148, even) is drawn edge to edge
    assert tuple(pixels[0, 0]) == CHRIS_RGB
    assert tuple(pixels[49, 49]) == CHRIS_RGB
    # cell 1 (79, odd) and cell 12 (25, odd) stay background
    assert tuple(pixels[25, 75]) == DEFAULT_BACKGROUND
    assert tuple(pixels[0, 50]) == DEFAULT_BACKGROUND
    assert tuple(pixels[125, 125]) == DEFAULT_BACKGROUND
    # cell 24 (102, even)
    assert tuple(pixels[249, 249]) == CHRIS_RGB


def test_render_is_horizontally_symmetric() -> None:
    pixels = to_array(render(build("symmetry")))
    assert np.array_equal(pixels, pixels[:, ::-1])


def test_render_counts_drawn_pixels() -> None:
    image = build("Chris")
    assert image.pixel_map is not None
    pixels = to_array(render(image))
    drawn = np.all(pixels == np.array(CHRIS_RGB, dtype=np.uint8), axis=-1)
    assert int(drawn.sum()) == len(image.pixel_map) * 50 * 50


def test_render_custom_background() -> None:
    pixels = to_array(render(build("Chris"), background=(0, 0, 0)))
    assert tuple(pixels[125, 125]) == (0, 0, 0)


def test_render_requires_pixel_map() -> None:
    with pytest.raises(StagePreconditionError):
        render(hash_input("Chris"))


def test_encode_png_round_trips_size() -> None:
    data = encode_png(render(build("Chris")))
    assert data.startswith(b"\x89PNG")
    assert Image.open(io.BytesIO(data)).size == (250, 250)


def test_renderer_object() -> None:
    renderer = IdenticonRenderer(background=(10, 20, 30))
    image = build("Chris")
    assert tuple(renderer.render_array(image)[125, 125]) == (10, 20, 30)
    decoded = Image.open(io.BytesIO(renderer.render_png(image))).convert("RGB")
    assert decoded.getpixel((0, 0)) == CHRIS_RGB


def test_render_failure_is_wrapped(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_new(*args: object, **kwargs: object) -> Image.Image:
        raise OSError("out of memory")

    monkeypatch.setattr(Image, "new", broken_new)
    with pytest.raises(RenderError) as excinfo:
        render(build("Chris"))
    assert isinstance(excinfo.value.__cause__, OSError)
