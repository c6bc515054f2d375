from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from parcoords.models.dataset import ColumnType, DatasetDefinition, Record
from parcoords.services.scales import Scale, build_scales
from parcoords.services.schema import Row, build_rows, infer_schema
from parcoords.utils.constants import (
    MAX_PLOT_HEIGHT,
    MIN_PLOT_HEIGHT,
    PLOT_HEIGHT_EXTRA,
    RECORDS_PER_PIXEL_ROW,
)


@dataclass(frozen=True)
class ViewModel:
    """Everything the renderer needs for one dataset, computed in one pass."""

    dataset_id: str
    records: tuple[Record, ...]
    rows: tuple[Row, ...]
    dimensions: tuple[str, ...]
    column_types: Mapping[str, ColumnType]
    scales: Mapping[str, Scale]
    height: float
    static_schema: bool = False

    @property
    def record_count(self) -> int:
        return len(self.records)


def plot_height(record_count: int) -> int:
    """Vertical extent of the axes, clamped so tiny and huge datasets stay readable."""
    rows = math.ceil(record_count / RECORDS_PER_PIXEL_ROW)
    return max(MIN_PLOT_HEIGHT, min(MAX_PLOT_HEIGHT, rows)) + PLOT_HEIGHT_EXTRA


def build_view_model(
    dataset_id: str,
    records: Sequence[Record],
    definition: DatasetDefinition | None = None,
    *,
    use_static: bool = True,
) -> ViewModel:
    schema = infer_schema(records, definition, use_static=use_static)
    rows = build_rows(records, schema, dataset_id=dataset_id)
    height = plot_height(len(records))
    scales = build_scales(rows, schema.dimensions, schema.column_types, height)
    return ViewModel(
        dataset_id=dataset_id,
        records=tuple(records),
        rows=rows,
        dimensions=schema.dimensions,
        column_types=dict(schema.column_types),
        scales=scales,
        height=height,
        static_schema=schema.static,
    )
