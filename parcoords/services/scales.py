"""Value-to-position mappings, one per dimension.

Positions are vertical screen coordinates in ``[0, height]`` with ``0`` at the
top, so larger numbers and later categories plot higher.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from parcoords.models.dataset import ColumnType
from parcoords.models.values import Cell, Number, Text
from parcoords.utils.constants import NUMERIC_TICK_FRACTIONS


@dataclass(frozen=True)
class Tick:
    value: float | str
    position: float
    label: str


@dataclass(frozen=True)
class LinearScale:
    domain_min: float
    domain_max: float
    height: float

    @property
    def degenerate(self) -> bool:
        return self.domain_max == self.domain_min

    def position(self, value: float) -> float:
        if self.degenerate:
            return self.height / 2
        fraction = (value - self.domain_min) / (self.domain_max - self.domain_min)
        return self.height - fraction * self.height

    def __call__(self, cell: Cell) -> float | None:
        if isinstance(cell, Number):
            return self.position(cell.value)
        return None

    def ticks(self) -> list[Tick]:
        span = self.domain_max - self.domain_min
        ticks = []
        for fraction in NUMERIC_TICK_FRACTIONS:
            value = self.domain_min + span * fraction
            ticks.append(Tick(value=value, position=self.position(value), label=f"{value:.2f}"))
        return ticks


@dataclass(frozen=True)
class PointScale:
    domain: tuple[str, ...]
    height: float

    def position(self, value: str) -> float | None:
        try:
            index = self.domain.index(value)
        except ValueError:
            return None
        if len(self.domain) == 1:
            return self.height / 2
        step = self.height / (len(self.domain) - 1)
        return self.height - index * step

    def __call__(self, cell: Cell) -> float | None:
        if isinstance(cell, Text):
            return self.position(cell.value)
        return None

    def ticks(self) -> list[Tick]:
        ticks = []
        for value in self.domain:
            position = self.position(value)
            if position is not None:
                ticks.append(Tick(value=value, position=position, label=value))
        return ticks


Scale = LinearScale | PointScale


def _numbers(cells: Iterable[Cell]) -> list[float]:
    return [cell.value for cell in cells if isinstance(cell, Number)]


def _texts(cells: Iterable[Cell]) -> list[str]:
    return [cell.value for cell in cells if isinstance(cell, Text)]


def build_scale(cells: Sequence[Cell], column_type: ColumnType, height: float) -> Scale:
    """Build the scale for one column from its already-classified cells."""
    if column_type is ColumnType.numeric:
        numbers = _numbers(cells)
        if not numbers:
            return LinearScale(0.0, 0.0, height)
        return LinearScale(min(numbers), max(numbers), height)
    return PointScale(tuple(sorted(set(_texts(cells)))), height)


def build_scales(
    rows: Sequence[Mapping[str, Cell]],
    dimensions: Sequence[str],
    column_types: Mapping[str, ColumnType],
    height: float,
) -> dict[str, Scale]:
    return {
        dimension: build_scale([row[dimension] for row in rows], column_types[dimension], height)
        for dimension in dimensions
    }
