import numpy as np

from detectors.accumulator import Accumulator
from detectors.voting import project_point, cast_point
from utils.trig_cache import TrigCache


def test_projection_folds_negative_distances():
    cache = TrigCache(360, 180)

    angles, distances = project_point(10, 0, cache, 180)

    assert len(angles) == len(distances) == 180
    assert (angles[0], distances[0]) == (0, 10)
    assert (angles[90], distances[90]) == (90, 0)
    # cos(179) < 0: represented as (180 + 179, 10)
    assert (angles[179], distances[179]) == (359, 10)
    assert (distances >= 0).all()
    assert ((angles >= 0) & (angles < 360)).all()


def test_projection_of_the_origin_is_a_single_distance():
    cache = TrigCache(360, 180)

    angles, distances = project_point(0, 0, cache, 180)

    assert np.array_equal(angles, np.arange(180))
    assert not distances.any()


def test_cast_classifies_in_angle_order():
    cache = TrigCache(360, 180)
    acc = Accumulator(360, 50, num_points=1, threshold=1)
    seen = []

    classified = cast_point(0, (30, -40), cache, acc, lambda t, r: seen.append((t, r)))

    assert classified == seen
    assert len(classified) == 180
    assert all(acc.is_processed(t, r) for t, r in classified)


def test_cast_twice_changes_nothing():
    cache = TrigCache(360, 180)
    acc = Accumulator(360, 50, num_points=1, threshold=1)
    cast_point(0, (30, -40), cache, acc, lambda t, r: None)
    before = acc.counts.copy()

    classified = cast_point(0, (30, -40), cache, acc, lambda t, r: None)

    assert classified == []
    assert np.array_equal(acc.counts, before)
