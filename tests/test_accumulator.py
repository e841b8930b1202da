import numpy as np
import pytest

from detectors.accumulator import Accumulator


@pytest.fixture
def acc():
    return Accumulator(circumference=360, semi_diagonal=10, num_points=3, threshold=2)


def test_grid_includes_the_semi_diagonal_row(acc):
    assert acc.shape == (360, 11)
    assert acc.counts.shape == (360, 11)
    assert not acc.counts.any()


def test_a_point_votes_once_per_cell(acc):
    assert acc.vote(5, 3, 0) is False
    assert acc.vote(5, 3, 0) is False

    assert acc.count(5, 3) == 1
    assert acc.has_voted(5, 3, 0)
    assert not acc.has_voted(5, 3, 1)


def test_vote_reports_the_threshold_crossing_until_processed(acc):
    acc.vote(5, 3, 0)

    assert acc.vote(5, 3, 1) is True
    acc.mark_processed(5, 3)

    assert acc.vote(5, 3, 2) is False
    assert acc.count(5, 3) == 3
    assert acc.is_processed(5, 3)
    assert acc.processed_count == 1


def test_cell_snapshot(acc):
    acc.vote(7, 10, 0)
    acc.vote(7, 10, 2)

    cell = acc.cell(7, 10)

    assert (cell.angle, cell.distance) == (7, 10)
    assert cell.count == 2
    assert cell.processed is False
    assert cell.voters == frozenset({0, 2})


@pytest.mark.parametrize("angle, distance", [(360, 0), (-1, 0), (0, 11), (0, -1)])
def test_out_of_range_cells(acc, angle, distance):
    with pytest.raises(IndexError):
        acc.vote(angle, distance, 0)


@pytest.mark.parametrize("index", [-1, 3])
def test_out_of_range_points(acc, index):
    with pytest.raises(IndexError):
        acc.vote(0, 0, index)


def test_counts_view_is_read_only(acc):
    acc.vote(1, 1, 0)
    counts = acc.counts

    assert counts[1, 1] == 1
    with pytest.raises(ValueError):
        counts[0, 0] = 5
    assert np.count_nonzero(acc.counts) == 1


def test_threshold_must_be_positive():
    with pytest.raises(ValueError):
        Accumulator(360, 10, 3, threshold=0)
