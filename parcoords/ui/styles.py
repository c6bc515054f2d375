from __future__ import annotations

import html

import streamlit as st

CHART_STYLES = """
<style>
.chart-container {
  overflow-x: auto;
  padding: 20px;
  background: #fff;
}
.chart-container svg {
  max-width: 100%;
  height: auto;
}
.chart-container .line {
  fill: none;
  stroke-width: 1.5px;
  opacity: 0.6;
}
.chart-container .line:hover {
  stroke-width: 3px;
  opacity: 1;
}
.chart-container .axis-label {
  font-size: 13px;
  font-weight: 600;
}
.chart-container .axis-tick {
  font-size: 10px;
  fill: #555;
}
</style>
"""


def apply_chart_styles() -> None:
    """Inject the stroke and label styles the SVG relies on.

    Streamlit rebuilds the page on every rerun, so this runs on each pass.
    """
    st.markdown(CHART_STYLES, unsafe_allow_html=True)


def chart_html(svg: str) -> str:
    return f'<div class="chart-container">{svg}</div>'


def error_html(message: str) -> str:
    return f'<div class="chart-container"><p style="color: red;">{html.escape(message)}</p></div>'
