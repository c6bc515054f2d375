"""Lay out a parallel-coordinates chart as a flat list of drawing primitives.

The renderer is a pure function of the view model and the container width:
every call builds a brand new ``Scene`` and nothing is reused between calls.
Serialising the scene is ``parcoords.services.svg``'s job.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from parcoords.models.dataset import ColumnType
from parcoords.models.values import is_missing
from parcoords.services.colors import DEFAULT_COLOR_RULE, ColorRule, legend_entries
from parcoords.services.scales import Tick
from parcoords.services.view_model import ViewModel
from parcoords.utils.config import CONTAINER_PADDING, Margin
from parcoords.utils.constants import AXIS_STROKE, CAPTION_FILL, MIN_AXIS_SPACING, TICK_STROKE

Point = tuple[float, float]


def format_number(value: float) -> str:
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    stroke_width: float = 1
    css_class: str | None = None


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    text: str
    anchor: str = "start"
    css_class: str | None = None
    font_size: str | None = None
    font_weight: str | None = None
    fill: str | None = None


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: str
    stroke: str
    stroke_width: float = 1


@dataclass(frozen=True)
class Path:
    points: tuple[Point, ...]
    stroke: str
    css_class: str = "line"

    @property
    def d(self) -> str:
        return "".join(
            f"{'M' if index == 0 else 'L'}{format_number(x)},{format_number(y)}"
            for index, (x, y) in enumerate(self.points)
        )


Element = Union[Line, Text, Rect, Path]


@dataclass(frozen=True)
class ChartLayout:
    width: float
    height: float
    margin: Margin
    axis_positions: tuple[float, ...]

    @property
    def svg_width(self) -> float:
        return self.width + self.margin.left + self.margin.right

    @property
    def svg_height(self) -> float:
        return self.height + self.margin.top + self.margin.bottom


@dataclass(frozen=True)
class AxisGlyph:
    dimension: str
    x: float
    column_type: ColumnType
    ticks: tuple[Tick, ...]


@dataclass(frozen=True)
class Polyline:
    record_index: int
    points: tuple[Point, ...]
    color: str


@dataclass(frozen=True)
class Scene:
    layout: ChartLayout
    elements: tuple[Element, ...]
    axes: tuple[AxisGlyph, ...]
    polylines: tuple[Polyline, ...]
    record_count: int


def axis_positions(dimension_count: int, width: float) -> tuple[float, ...]:
    if dimension_count == 0:
        return ()
    if dimension_count == 1:
        return (width / 2,)
    step = width / (dimension_count - 1)
    return tuple(step * index for index in range(dimension_count))


def compute_layout(
    dimension_count: int,
    height: float,
    container_width: float,
    *,
    margin: Margin | None = None,
    container_padding: float = CONTAINER_PADDING,
) -> ChartLayout:
    margin = margin or Margin()
    usable = container_width - container_padding - margin.left - margin.right
    width = max(usable, dimension_count * MIN_AXIS_SPACING)
    return ChartLayout(
        width=width,
        height=height,
        margin=margin,
        axis_positions=axis_positions(dimension_count, width),
    )


def _tick_elements(x: float, tick: Tick) -> list[Element]:
    return [
        Line(x - 5, tick.position, x + 5, tick.position, stroke=TICK_STROKE),
        Text(x - 12, tick.position + 4, tick.label, anchor="end", css_class="axis-tick"),
    ]


def _legend_elements(layout: ChartLayout, record_count: int) -> list[Element]:
    left = layout.width
    elements: list[Element] = [
        Rect(left + 20, -30, 150, 80, fill="white", stroke=AXIS_STROKE),
        Text(left + 30, -10, "Legend:", font_size="12px", font_weight="bold"),
    ]
    for index, entry in enumerate(legend_entries()):
        y = 5 + index * 25
        elements.append(Line(left + 30, y, left + 50, y, stroke=entry.color, stroke_width=2))
        elements.append(Text(left + 60, y + 5, entry.label, font_size="12px"))
    elements.append(
        Text(
            left + 20,
            layout.height - 20,
            f"Records: {record_count}",
            font_size="11px",
            fill=CAPTION_FILL,
        )
    )
    return elements


def render_chart(
    view: ViewModel,
    container_width: float,
    *,
    margin: Margin | None = None,
    container_padding: float = CONTAINER_PADDING,
    color_rule: ColorRule = DEFAULT_COLOR_RULE,
) -> Scene:
    layout = compute_layout(
        len(view.dimensions),
        view.height,
        container_width,
        margin=margin,
        container_padding=container_padding,
    )
    elements: list[Element] = []
    axes: list[AxisGlyph] = []

    for dimension, x in zip(view.dimensions, layout.axis_positions):
        scale = view.scales[dimension]
        ticks = tuple(scale.ticks())
        elements.append(Line(x, 0, x, layout.height, stroke=AXIS_STROKE, css_class="axis-line"))
        elements.append(Text(x, -20, dimension, anchor="middle", css_class="axis-label"))
        for tick in ticks:
            elements.extend(_tick_elements(x, tick))
        axes.append(AxisGlyph(dimension, x, view.column_types[dimension], ticks))

    polylines: list[Polyline] = []
    for index, (record, row) in enumerate(zip(view.records, view.rows)):
        points: list[Point] = []
        for dimension, x in zip(view.dimensions, layout.axis_positions):
            cell = row[dimension]
            if is_missing(cell):
                continue
            y = view.scales[dimension](cell)
            if y is not None:
                points.append((x, y))
        # A single point cannot form a segment.
        if len(points) < 2:
            continue
        polyline = Polyline(index, tuple(points), color_rule(record))
        polylines.append(polyline)
        elements.append(Path(polyline.points, stroke=polyline.color))

    elements.extend(_legend_elements(layout, view.record_count))
    return Scene(
        layout=layout,
        elements=tuple(elements),
        axes=tuple(axes),
        polylines=tuple(polylines),
        record_count=view.record_count,
    )
