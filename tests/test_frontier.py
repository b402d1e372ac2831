"""Tests for the open list."""

import pytest

from rastar.errors import FrontierEmpty
from rastar.frontier import CellRecord, Frontier


def test_pop_min_orders_by_total_cost():
    frontier = Frontier()
    frontier.insert(5, 3.0)
    frontier.insert(2, 1.5)
    frontier.insert(9, 2.0)

    assert frontier.pop_min() == CellRecord(1.5, 2)
    assert frontier.pop_min().cell == 9
    assert frontier.pop_min().cell == 5


def test_duplicates_are_kept():
    frontier = Frontier()
    frontier.insert(4, 5.0)
    frontier.insert(4, 2.0)
    assert len(frontier) == 2

    first = frontier.pop_min()
    second = frontier.pop_min()
    assert (first.cell, first.total_cost) == (4, 2.0)
    assert (second.cell, second.total_cost) == (4, 5.0)


def test_ties_pop_lowest_cell_index_first():
    frontier = Frontier()
    for cell in (17, 3, 11, 8):
        frontier.insert(cell, 1.0)
    assert [frontier.pop_min().cell for _ in range(4)] == [3, 8, 11, 17]


def test_pop_from_empty_frontier():
    frontier = Frontier()
    assert not frontier
    with pytest.raises(FrontierEmpty):
        frontier.pop_min()
    with pytest.raises(IndexError):
        frontier.peek()


def test_peek_does_not_remove():
    frontier = Frontier()
    frontier.insert(1, 0.5)
    assert frontier.peek().cell == 1
    assert len(frontier) == 1
    assert frontier
