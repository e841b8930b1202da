import math

import pytest

from models.point import Geometry, Point
from utils.geometry import angle_distance, radius_distance, circular_mean, to_radians, to_degrees
from utils.trig_cache import TrigCache


def test_angle_distance_takes_the_short_path():
    assert angle_distance(1, 359, 360) == 2
    assert angle_distance(359, 1, 360) == 2
    assert angle_distance(10, 20, 360) == 10
    assert angle_distance(0, 180, 360) == 180


def test_radius_distance():
    assert radius_distance(10, 4) == 6
    assert radius_distance(4.5, 10) == 5.5


def test_circular_mean_across_the_wrap():
    cache = TrigCache(360, 180)

    mean = circular_mean([1, 359], cache)

    assert angle_distance(mean, 0, 360) < 1e-6


def test_circular_mean_of_close_angles():
    cache = TrigCache(360, 180)

    assert circular_mean([10, 20], cache) == pytest.approx(15.0)


def test_circular_mean_is_normalised():
    cache = TrigCache(360, 180)

    assert circular_mean([270], cache) == pytest.approx(270.0)
    assert 0 <= circular_mean([350, 340], cache) < 360


def test_circular_mean_of_nothing():
    with pytest.raises(ValueError):
        circular_mean([], TrigCache(360, 180))


def test_unit_conversions():
    assert to_radians(90, 180) == pytest.approx(math.pi / 2)
    assert to_radians(900, 1800) == pytest.approx(math.pi / 2)
    assert to_degrees(905, 10) == pytest.approx(90.5)


def test_geometry_diagonals():
    g = Geometry(800, 600)
    assert g.diagonal == 1000
    assert g.semi_diagonal == 500

    g = Geometry(3, 3)
    assert g.diagonal == 5
    assert g.semi_diagonal == 3


def test_geometry_from_size():
    g = Geometry.from_size((800, 600))
    assert (g.width, g.height) == (800, 600)
    assert Geometry.from_size(g) is g


def test_geometry_rejects_empty_images():
    with pytest.raises(ValueError):
        Geometry(0, 10)


def test_point_unpacks():
    x, y = Point(3, -4)
    assert (x, y) == (3, -4)
