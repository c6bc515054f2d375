"""Serialise a rendered ``Scene`` into a standalone inline SVG document."""

from __future__ import annotations

import html as _html

from parcoords.services.renderer import Element, Line, Path, Rect, Scene, Text, format_number


def _esc(text: object) -> str:
    return _html.escape(str(text), quote=True)


def _num(value: float) -> str:
    return format_number(value)


def _style(**properties: object) -> str:
    parts = [
        f"{name.replace('_', '-')}: {value}"
        for name, value in properties.items()
        if value is not None
    ]
    return f' style="{_esc("; ".join(parts))}"' if parts else ""


def _class(css_class: str | None) -> str:
    return f' class="{_esc(css_class)}"' if css_class else ""


def _svg_line(line: Line) -> str:
    return (
        f'<line{_class(line.css_class)} x1="{_num(line.x1)}" x2="{_num(line.x2)}"'
        f' y1="{_num(line.y1)}" y2="{_num(line.y2)}"'
        f"{_style(stroke=line.stroke, stroke_width=_num(line.stroke_width))}/>"
    )


def _svg_text(text: Text) -> str:
    style = _style(font_size=text.font_size, font_weight=text.font_weight, fill=text.fill)
    return (
        f'<text{_class(text.css_class)} x="{_num(text.x)}" y="{_num(text.y)}"'
        f' text-anchor="{_esc(text.anchor)}"{style}>{_esc(text.text)}</text>'
    )


def _svg_rect(rect: Rect) -> str:
    return (
        f'<rect x="{_num(rect.x)}" y="{_num(rect.y)}" width="{_num(rect.width)}"'
        f' height="{_num(rect.height)}"'
        f"{_style(fill=rect.fill, stroke=rect.stroke, stroke_width=_num(rect.stroke_width))}/>"
    )


def _svg_path(path: Path) -> str:
    return f'<path{_class(path.css_class)} d="{path.d}"{_style(stroke=path.stroke)}/>'


def render_element(element: Element) -> str:
    if isinstance(element, Line):
        return _svg_line(element)
    if isinstance(element, Text):
        return _svg_text(element)
    if isinstance(element, Rect):
        return _svg_rect(element)
    if isinstance(element, Path):
        return _svg_path(element)
    raise TypeError(f"unsupported scene element: {type(element).__name__}")


def scene_to_svg(scene: Scene) -> str:
    layout = scene.layout
    width = _num(layout.svg_width)
    height = _num(layout.svg_height)
    body = "".join(render_element(element) for element in scene.elements)
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}"'
        f' viewBox="0 0 {width} {height}" preserveAspectRatio="xMidYMid meet">'
        f'<g transform="translate({_num(layout.margin.left)},{_num(layout.margin.top)})">'
        f"{body}</g></svg>"
    )
