import logging

import pytest

from detectors.classifier import Classifier
from utils.geometry import angle_distance
from utils.trig_cache import TrigCache


def make_classifier(tolerance_t=5, tolerance_r=1, max_lines=10, **kwargs):
    return Classifier(TrigCache(360, 180), tolerance_t, tolerance_r, max_lines, **kwargs)


def test_first_cell_seeds_a_center():
    c = make_classifier()

    assert c.classify(10, 20) == 0
    assert len(c) == 1
    assert c.centers[0].t == 10
    assert c.centers[0].r == 20
    assert c.centers[0].cells == [(10, 20)]


def test_merge_across_the_wrap_uses_the_circular_mean():
    c = make_classifier()
    c.classify(1, 50)

    assert c.classify(359, 50) == 0

    center = c.centers[0]
    assert center.size == 2
    assert angle_distance(center.t, 0, 360) < 1e-6
    assert center.r == pytest.approx(50)


def test_merge_averages_every_member():
    c = make_classifier()
    c.classify(10, 10)
    c.classify(12, 12)
    c.classify(14, 14)

    center = c.centers[0]
    assert center.size == 3
    assert center.t == pytest.approx(12.0)
    assert center.r == pytest.approx(12.0)


def test_far_cells_seed_new_centers():
    c = make_classifier()
    c.classify(1, 50)

    assert c.classify(180, 50) == 1
    assert c.classify(1, 80) == 2
    assert len(c) == 3


def test_distance_axis_uses_the_angle_tolerance_by_default():
    c = make_classifier(tolerance_t=5, tolerance_r=1)
    c.classify(0, 50)

    # dr = 4 is over tolerance_r but within tolerance_t
    assert c.classify(2, 54) == 0
    assert len(c) == 1


def test_distance_tolerance_can_be_enabled():
    c = make_classifier(tolerance_t=5, tolerance_r=1, use_distance_tolerance=True)
    c.classify(0, 50)

    assert c.classify(2, 54) == 1
    assert c.classify(3, 51) == 0


def test_nearest_prefers_the_closest_center():
    c = make_classifier(tolerance_t=5)
    c.classify(0, 0)
    c.classify(20, 0)

    index, dt, dr = c.nearest(17, 0)

    assert index == 1
    assert dt == 3
    assert dr == 0
    assert make_classifier().nearest(0, 0) is None


def test_full_classifier_drops_new_centers(caplog):
    c = make_classifier(max_lines=1)
    c.classify(10, 10)

    with caplog.at_level(logging.WARNING):
        assert c.classify(100, 100) is None

    assert len(c) == 1
    assert c.dropped == 1
    assert "Classifier full" in caplog.text


def test_full_center_drops_merges(caplog):
    c = make_classifier(max_lines=1)
    c.classify(10, 10)

    with caplog.at_level(logging.WARNING):
        assert c.classify(11, 10) is None

    assert c.centers[0].size == 1
    assert c.centers[0].t == 10
    assert "Impossible to keep more cells" in caplog.text
