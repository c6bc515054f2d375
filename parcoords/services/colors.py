from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from parcoords.utils.constants import (
    COLOR_FEMALE,
    COLOR_MALE,
    COLOR_UNKNOWN,
    LEGEND_ENTRIES,
    LegendEntry,
)


@dataclass(frozen=True)
class ColorRule:
    """Pick a stroke color from one attribute of the raw record."""

    attribute: str = "gender"
    colors: Mapping[str, str] = field(
        default_factory=lambda: {"M": COLOR_MALE, "F": COLOR_FEMALE}
    )
    fallback: str = COLOR_UNKNOWN

    def __call__(self, record: Mapping[str, object]) -> str:
        value = record.get(self.attribute)
        if isinstance(value, str):
            return self.colors.get(value, self.fallback)
        return self.fallback


DEFAULT_COLOR_RULE = ColorRule()


def get_line_color(record: Mapping[str, object]) -> str:
    return DEFAULT_COLOR_RULE(record)


def legend_entries() -> tuple[LegendEntry, ...]:
    # Static: not derived from the values actually present in the dataset.
    return LEGEND_ENTRIES
