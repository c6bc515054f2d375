"""Colors and fixed chart styling shared by the renderer and the legend."""

from __future__ import annotations

from dataclasses import dataclass

COLOR_MALE = "#1f77b4"
COLOR_FEMALE = "#ff7f0e"
COLOR_UNKNOWN = "#999"

AXIS_STROKE = "#ccc"
TICK_STROKE = "#999"
CAPTION_FILL = "#666"

MIN_AXIS_SPACING = 100
"""Minimum horizontal room per axis so labels stay legible."""

MIN_PLOT_HEIGHT = 400
MAX_PLOT_HEIGHT = 600
PLOT_HEIGHT_EXTRA = 200
RECORDS_PER_PIXEL_ROW = 15

NUMERIC_TICK_FRACTIONS: tuple[float, ...] = (0.0, 0.25, 0.5, 0.75, 1.0)

LOAD_ERROR_MESSAGE = "Error loading dataset"


@dataclass(frozen=True)
class LegendEntry:
    label: str
    color: str


LEGEND_ENTRIES: tuple[LegendEntry, ...] = (
    LegendEntry("Male", COLOR_MALE),
    LegendEntry("Female", COLOR_FEMALE),
)
