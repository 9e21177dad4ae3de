import pytest

from lifesim.core.cell import Cell


def test_create_cell():
    cell = Cell(x=1, y=2)
    assert cell.x == 1
    assert cell.y == 2


def test_cell_value_semantics():
    assert Cell(3, -4) == Cell(3, -4)
    assert hash(Cell(3, -4)) == hash(Cell(3, -4))
    assert len({Cell(0, 0), Cell(0, 0), Cell(0, 1)}) == 2


def test_cell_immutable():
    cell = Cell(0, 0)
    with pytest.raises(AttributeError):
        cell.x = 5


def test_neighbors_canonical_order():
    cell = Cell(0, 1)
    assert cell.neighbors() == (
        Cell(-1, 0),
        Cell(-1, 1),
        Cell(-1, 2),
        Cell(0, 0),
        Cell(0, 2),
        Cell(1, 0),
        Cell(1, 1),
        Cell(1, 2),
    )


def test_neighbors_exclude_self():
    cell = Cell(0, 1)
    neighbors = cell.neighbors()
    assert len(neighbors) == 8
    assert len(set(neighbors)) == 8
    assert cell not in neighbors


def test_neighbors_of_large_coordinates():
    big = 2**70
    neighbors = Cell(big, -big).neighbors()
    assert neighbors[0] == Cell(big - 1, -big - 1)
    assert neighbors[-1] == Cell(big + 1, -big + 1)
