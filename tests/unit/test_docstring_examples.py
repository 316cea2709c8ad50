import doctest
from types import ModuleType

import pytest

from identicon.systems import color as color_stage
from identicon.systems import grid as grid_stage
from identicon.systems import hash as hash_stage


@pytest.mark.parametrize("module", [hash_stage, color_stage, grid_stage])
def test_docstring_examples_run(module: ModuleType) -> None:
    result = doctest.testmod(module)
    assert result.attempted > 0
    assert result.failed == 0
