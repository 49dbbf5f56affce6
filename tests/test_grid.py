import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpkit.grid import MOVES, in_bounds, neighbours, yesno


def test_yesno():
    assert yesno(True) == "YES"
    assert yesno(False) == "NO"


@given(st.integers(min_value=1, max_value=50), st.integers(min_value=1, max_value=50))
def test_in_bounds_edges(rows, cols):
    assert in_bounds(0, 0, rows, cols)
    assert in_bounds(rows - 1, cols - 1, rows, cols)
    assert not in_bounds(rows, 0, rows, cols)
    assert not in_bounds(0, cols, rows, cols)
    assert not in_bounds(-1, 0, rows, cols)
    assert not in_bounds(0, -1, rows, cols)


def test_neighbours_interior_follows_move_order():
    assert list(neighbours(1, 1, 3, 3)) == [(1 + di, 1 + dj) for di, dj in MOVES]


@pytest.mark.parametrize("cell", [(0, 0), (0, 2), (2, 0), (2, 2)])
def test_neighbours_corner_has_two(cell):
    assert len(list(neighbours(*cell, 3, 3))) == 2


@given(
    st.integers(min_value=1, max_value=20),
    st.integers(min_value=1, max_value=20),
    st.data(),
)
def test_neighbours_are_adjacent_and_inside(rows, cols, data):
    i = data.draw(st.integers(min_value=0, max_value=rows - 1))
    j = data.draw(st.integers(min_value=0, max_value=cols - 1))
    result = list(neighbours(i, j, rows, cols))
    assert len(result) == len(set(result))
    for ni, nj in result:
        assert in_bounds(ni, nj, rows, cols)
        assert abs(ni - i) + abs(nj - j) == 1