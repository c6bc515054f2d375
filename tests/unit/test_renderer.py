from __future__ import annotations

import pytest

from parcoords.models.dataset import ColumnType
from parcoords.services.renderer import (
    Path,
    Rect,
    Text,
    axis_positions,
    compute_layout,
    format_number,
    render_chart,
)
from parcoords.services.view_model import build_view_model, plot_height
from parcoords.utils.config import Margin
from tests.fixtures.datasets import SMALL_RECORDS


@pytest.mark.parametrize(
    ("record_count", "expected"),
    [(0, 600), (3, 600), (15 * 500, 700), (15 * 5000, 800)],
)
def test_plot_height_is_clamped(record_count: int, expected: int) -> None:
    assert plot_height(record_count) == expected


def test_layout_uses_container_width_minus_padding_and_margins() -> None:
    layout = compute_layout(2, 600, 1200)

    assert layout.width == 1200 - 40 - 180 - 180
    assert layout.axis_positions == (0.0, 800.0)
    assert layout.svg_width == 1160
    assert layout.svg_height == 600 + 50 + 20


def test_layout_enforces_minimum_axis_spacing() -> None:
    layout = compute_layout(5, 600, 300)

    assert layout.width == 500
    assert layout.axis_positions == (0.0, 125.0, 250.0, 375.0, 500.0)


def test_layout_respects_custom_margin() -> None:
    layout = compute_layout(2, 600, 1000, margin=Margin(top=10, right=10, bottom=10, left=10), container_padding=0)

    assert layout.width == 980
    assert layout.svg_height == 620


def test_axis_positions_edge_cases() -> None:
    assert axis_positions(0, 800) == ()
    assert axis_positions(1, 800) == (400.0,)


def test_small_dataset_axes_and_lines() -> None:
    view = build_view_model("small", SMALL_RECORDS)

    scene = render_chart(view, 1200)

    assert [axis.dimension for axis in scene.axes] == ["a", "b"]
    assert [axis.column_type for axis in scene.axes] == [ColumnType.numeric, ColumnType.nominal]
    assert [len(axis.ticks) for axis in scene.axes] == [5, 2]
    assert len(scene.polylines) == 3
    assert [polyline.points for polyline in scene.polylines] == [
        ((0.0, 600.0), (800.0, 600.0)),
        ((0.0, 300.0), (800.0, 0.0)),
        ((0.0, 0.0), (800.0, 600.0)),
    ]
    assert {polyline.color for polyline in scene.polylines} == {"#999"}


def test_missing_value_skips_vertex() -> None:
    records = [
        {"x": 1, "y": 5, "z": "p"},
        {"x": 2, "y": None, "z": "q"},
    ]
    view = build_view_model("gap", records)

    scene = render_chart(view, 1200)

    gap = scene.polylines[1]
    assert len(gap.points) == 2
    assert [x for x, _ in gap.points] == [0.0, 800.0]


def test_record_with_single_present_value_draws_no_line() -> None:
    records = [
        {"x": 1, "y": 5, "z": "p"},
        {"x": None, "y": None, "z": "q"},
    ]
    view = build_view_model("lonely", records)

    scene = render_chart(view, 1200)

    assert [polyline.record_index for polyline in scene.polylines] == [0]
    assert sum(isinstance(element, Path) for element in scene.elements) == 1


def test_single_dimension_axis_is_centered_and_has_no_lines() -> None:
    view = build_view_model("one", [{"v": 1}, {"v": 2}])

    scene = render_chart(view, 1200)

    assert [axis.x for axis in scene.axes] == [400.0]
    assert scene.polylines == ()


def test_line_colors_follow_gender() -> None:
    records = [
        {"gender": "M", "v": 1},
        {"gender": "F", "v": 2},
        {"gender": "X", "v": 3},
    ]
    view = build_view_model("colors", records)

    scene = render_chart(view, 1200)

    assert [polyline.color for polyline in scene.polylines] == ["#1f77b4", "#ff7f0e", "#999"]


def test_legend_and_record_count_are_drawn() -> None:
    view = build_view_model("small", SMALL_RECORDS)

    scene = render_chart(view, 1200)

    rects = [element for element in scene.elements if isinstance(element, Rect)]
    texts = [element.text for element in scene.elements if isinstance(element, Text)]
    assert len(rects) == 1
    assert (rects[0].x, rects[0].y, rects[0].width, rects[0].height) == (820, -30, 150, 80)
    assert {"Legend:", "Male", "Female", "Records: 3"} <= set(texts)


def test_every_render_builds_a_fresh_scene() -> None:
    view = build_view_model("small", SMALL_RECORDS)

    wide = render_chart(view, 2000)
    narrow = render_chart(view, 200)

    assert wide.layout.width == 1600
    assert narrow.layout.width == 200
    assert wide.elements != narrow.elements


def test_path_data_format() -> None:
    path = Path(((0.0, 600.0), (400.5, 0.126)), stroke="#999")

    assert path.d == "M0,600L400.5,0.13"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.0, "0"), (-0.001, "0"), (12.0, "12"), (1.5, "1.5"), (2.346, "2.35"), (-3.1, "-3.1")],
)
def test_format_number(value: float, expected: str) -> None:
    assert format_number(value) == expected
