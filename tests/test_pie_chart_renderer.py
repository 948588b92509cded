import math

import pytest

from conftest import make_category
from services.pie_chart_renderer import PieChartRenderer, compute_segments
from utils.constants import CHART_START_ANGLE


def _cats(*amounts):
    return [make_category(name=f"c{i}", amount=a, category_id=i) for i, a in enumerate(amounts)]


def test_sweeps_sum_to_full_circle():
    segments = compute_segments(_cats(3, 2, 1.5), ["#111111", "#222222", "#333333"])
    assert math.isclose(sum(s.sweep_angle for s in segments), 360.0, abs_tol=1e-9)
    assert all(s.sweep_angle >= 0 for s in segments)


def test_segments_chain_from_twelve_oclock():
    segments = compute_segments(_cats(1, 1, 2), ["#111111"])
    assert segments[0].start_angle == CHART_START_ANGLE
    for prev, nxt in zip(segments, segments[1:]):
        assert nxt.start_angle == prev.end_angle
    assert [s.sweep_angle for s in segments] == [90.0, 90.0, 180.0]


def test_only_first_three_used_in_given_order():
    segments = compute_segments(_cats(1, 1, 1, 100), ["#111111", "#222222", "#333333"])
    assert len(segments) == 3
    assert math.isclose(segments[0].sweep_angle, 120.0)


def test_colors_cycle_and_fall_back():
    segments = compute_segments(_cats(1, 1, 1), ["#AAAAAA"])
    assert {s.color for s in segments} == {"#AAAAAA"}
    assert compute_segments(_cats(1), [])[0].color == "#FF6B6B"


@pytest.mark.parametrize("amounts", [(), (0,), (0, 0, 0)])
def test_no_total_means_no_segments(amounts):
    assert compute_segments(_cats(*amounts), ["#111111"]) == []


def test_render_blank_when_total_zero():
    chart = PieChartRenderer().render(_cats(0, 0), ["#111111", "#222222"], 64)
    assert chart.is_blank
    assert chart.image.size == (64, 64)
    assert chart.image.getbbox() is None


def test_render_exact_size_and_segments():
    chart = PieChartRenderer().render(_cats(500000, 300000), ["#FF8A65", "#4ECDC4"], 156)
    assert chart.image.size == (156, 156)
    assert chart.image.mode == "RGBA"
    assert len(chart.segments) == 2
    assert chart.palette == ("#FF8A65", "#4ECDC4")
    assert math.isclose(chart.total_sweep, 360.0)


def test_render_draws_donut():
    size = 120
    chart = PieChartRenderer().render(_cats(1), ["#FF0000"], size)
    img = chart.image
    # corners stay transparent, the ring is red-ish, the hole is the inner color
    assert img.getpixel((0, 0))[3] == 0
    r, g, b, a = img.getpixel((size // 2 - 35, size // 2))
    assert a == 255 and r > 200 and g < 80
    hole = img.getpixel((size // 2 - 28, size // 2))
    assert hole[:3] == (0x07, 0x18, 0x2A)


def test_render_is_deterministic():
    renderer = PieChartRenderer()
    cats = _cats(5, 3, 2)
    colors = ["#FF8A65", "#4ECDC4", "#FFC857"]
    first = renderer.render(cats, colors, 100).image.tobytes()
    second = renderer.render(cats, colors, 100).image.tobytes()
    assert first == second


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        PieChartRenderer().render(_cats(1), ["#111111"], 0)
