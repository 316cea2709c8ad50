
import pytest

from identicon.errors import StagePreconditionError
from identicon.systems.color import pick_color
from identicon.systems.grid import build_grid
from identicon.systems.hash import hash_input
from identicon.types import Stage


def test_pick_color_uses_first_three_seed_bytes() -> None:
    image = pick_color(hash_input("Chris"))
    assert image.rgb == (148, 79, 172)
    assert image.stage == Stage.COLORED


def test_pick_color_returns_new_descriptor() -> None:
    seeded = hash_input("Chris")
    colored = pick_color(seeded)
    assert seeded.rgb is None
    assert colored.seed == seeded.seed


def test_pick_color_rejects_already_colored_descriptor() -> None:
    colored = pick_color(hash_input("Chris"))
    with pytest.raises(StagePreconditionError):
        pick_color(colored)


def test_pick_color_rejects_later_stage() -> None:
    image = build_grid(pick_color(hash_input("Chris")))
    with pytest.raises(StagePreconditionError):
        pick_color(image)
