"""Core immutable ``ImageDescriptor`` dataclass.

The descriptor is the single value threaded through the identicon pipeline.
Every stage is a pure function that accepts a descriptor and returns a *new*
one with one more field populated (``dataclasses.replace``); nothing is
mutated in place, so a descriptor can be inspected at any stage boundary.

Lifecycle (see :class:`identicon.types.Stage`):

* ``SEEDED``   - only ``seed`` is set (output of the hasher).
* ``COLORED``  - ``rgb`` is set.
* ``GRIDDED``  - ``grid`` holds all 25 ``(value, index)`` cells.
* ``FILTERED`` - ``grid`` holds only the even-valued cells, ``filtered`` is True.
* ``MAPPED``   - ``pixel_map`` holds one rectangle per remaining cell.

The seed is validated once here, at construction, so downstream stages can
rely on exactly 16 byte values.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import PMap, pmap
from pyrsistent.typing import PVector

from identicon.types import RGB, SEED_LENGTH, Cell, Rect, Stage


@dataclass(frozen=True)
class ImageDescriptor:
    """Immutable identicon descriptor.

    Attributes:
        seed (PVector[int]): The 16 digest bytes as integers in [0, 255].
        rgb (RGB | None): Fill colour, ``seed[0:3]`` once picked.
        grid (PVector[Cell] | None): ``(value, index)`` cells in row-major order.
        filtered (bool): True once odd-valued cells were removed from ``grid``.
        pixel_map (PVector[Rect] | None): ``((x0, y0), (x1, y1))`` per visible cell.
    """

    seed: PVector[int]
    rgb: Optional[RGB] = None
    grid: Optional[PVector[Cell]] = None
    filtered: bool = False
    pixel_map: Optional[PVector[Rect]] = None

    def __post_init__(self) -> None:
        if len(self.seed) != SEED_LENGTH:
            raise ValueError(
                f"Seed must have exactly {SEED_LENGTH} values, got {len(self.seed)}"
            )
        if any(not 0 <= value <= 255 for value in self.seed):
            raise ValueError(f"Seed values must be in [0, 255]: {list(self.seed)}")
        if self.grid is not None and self.rgb is None:
            raise ValueError("Grid requires rgb to be populated")
        if self.filtered and self.grid is None:
            raise ValueError("Filtered descriptor requires a grid")
        if self.pixel_map is not None and not self.filtered:
            raise ValueError("Pixel map requires a filtered grid")

    @property
    def stage(self) -> Stage:
        """Furthest lifecycle stage reached by this descriptor."""
        if self.pixel_map is not None:
            return Stage.MAPPED
        if self.filtered:
            return Stage.FILTERED
        if self.grid is not None:
            return Stage.GRIDDED
        if self.rgb is not None:
            return Stage.COLORED
        return Stage.SEEDED

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Returns:
            PMap[str, Any]: Field name to value for every field that is set,
            plus the derived ``stage``.
        """
        description: PMap[str, Any] = pmap({"stage": self.stage})
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None or value is False:
                continue
            description = description.set(field, value)
        return description
