import math

import numpy as np

from models.line import Line
from visualization.draw_accumulator import render_accumulator
from visualization.draw_lines import keep_line, line_endpoints, draw_lines, build_line_map
from visualization.save_outputs import save_all_outputs


def test_accumulator_rendering_is_red_and_upside_down():
    counts = np.zeros((360, 11), dtype=np.int32)
    counts[0, 0] = 20
    counts[5, 10] = 40

    image = render_accumulator(counts)

    assert image.shape == (11, 360, 3)
    # distance 0 is the bottom row
    assert image[10, 0, 2] == 255
    # saturated, distance 10 is the top row
    assert image[0, 5, 2] == 255
    assert not image[..., :2].any()
    assert np.count_nonzero(image) == 2


def test_keep_line_filters():
    assert not keep_line(Line(t=3 * math.pi / 2, r=50))          # horizontal
    assert not keep_line(Line(t=math.atan2(1, -2), r=0.0))        # through the origin
    assert keep_line(Line(t=math.atan2(1, -2), r=3 / math.sqrt(5)))
    assert keep_line(Line(t=0.0, r=20))                            # vertical


def test_vertical_endpoints():
    p0, p1 = line_endpoints(Line(t=0.0, r=0.0), width=11, height=11)

    assert p0[0] == p1[0] == 6


def test_line_map_of_a_vertical_line():
    line_map = build_line_map([Line(t=0.0, r=0.0)], (11, 11))

    assert line_map.dtype == np.uint8
    assert np.count_nonzero(line_map[:, 6]) >= 10
    assert np.count_nonzero(line_map[:, :6]) == 0
    assert np.count_nonzero(line_map[:, 7:]) == 0


def test_draw_lines_skips_filtered_lines():
    image = np.zeros((50, 50, 3), dtype=np.uint8)

    draw_lines(image, [Line(t=3 * math.pi / 2, r=10)])
    assert not image.any()

    draw_lines(image, [Line(t=math.atan2(1, -2), r=3 / math.sqrt(5))])
    assert image[..., 2].any()
    assert not image[..., :2].any()


def test_save_all_outputs(tmp_path):
    counts = np.zeros((360, 11), dtype=np.int32)
    small = np.zeros((40, 40), dtype=np.uint8)
    large = np.zeros((40, 40, 3), dtype=np.uint8)
    params = {
        "ACCUMULATOR_SCALE": 1.0 / 20.0,
        "OUTPUT_FACTOR": 1,
        "OUTPUT_SMALL_FACTOR": 1,
        "MIN_ABS_SLOPE": 0.5,
        "MIN_ABS_INTERCEPT": 1.0,
        "COLOR_LINE": (0, 0, 255),
    }
    names = {
        "accumulator": "accumulator.png",
        "output": "output.png",
        "output_small": "output_small.png",
        "linemap": "linemap.png",
    }

    save_all_outputs(str(tmp_path), counts, [Line(t=0.0, r=5.0)], small, large, params, names)

    for name in names.values():
        assert (tmp_path / name).exists()
