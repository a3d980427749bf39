"""Side and Cell value types."""

import pytest

from Jump61_AI.engine.sides import EMPTY_CELL, Cell, Side


def test_opponents():
    assert Side.RED.opponent() is Side.BLUE
    assert Side.BLUE.opponent() is Side.RED
    assert Side.NEUTRAL.opponent() is Side.NEUTRAL


def test_parse_side_names():
    assert Side.parse("Red") is Side.RED
    assert Side.parse(" blue ") is Side.BLUE
    with pytest.raises(ValueError):
        Side.parse("white")


def test_cell_is_immutable_value():
    cell = Cell(Side.RED, 2)
    assert cell == Cell(Side.RED, 2)
    assert str(cell) == "2r"
    assert str(EMPTY_CELL) == "1-"
    with pytest.raises(AttributeError):
        cell.spots = 3
