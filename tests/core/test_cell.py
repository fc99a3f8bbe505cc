import pytest

from lifesim.core.cell import Cell
from lifesim.core.exceptions import InvalidCellError


def test_cell_values():
    assert int(Cell.DEAD) == 0
    assert int(Cell.ALIVE) == 1
    assert list(Cell) == [Cell.DEAD, Cell.ALIVE]


@pytest.mark.parametrize(
    "value,expected",
    [
        (Cell.ALIVE, Cell.ALIVE),
        (Cell.DEAD, Cell.DEAD),
        (1, Cell.ALIVE),
        (0, Cell.DEAD),
        (True, Cell.ALIVE),
        (False, Cell.DEAD),
    ],
)
def test_coerce(value, expected):
    assert Cell.coerce(value) is expected


@pytest.mark.parametrize("value", [2, -1, "1", None, 1.0])
def test_coerce_rejects_invalid(value):
    with pytest.raises(InvalidCellError) as exc_info:
        Cell.coerce(value)

    assert exc_info.value.value == value


def test_str_is_numeric():
    assert str(Cell.ALIVE) == "1"
    assert str(Cell.DEAD) == "0"
