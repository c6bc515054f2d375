from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from parcoords.models.dataset import ColumnType, DatasetDefinition
from parcoords.models.values import MISSING, Cell, Number, Text, parse_number, text_form
from parcoords.utils.logging import get_logger, log_coerced_values

LOGGER = get_logger(__name__)

Row = Mapping[str, Cell]


@dataclass(frozen=True)
class Schema:
    dimensions: tuple[str, ...]
    column_types: Mapping[str, ColumnType]
    static: bool = False

    def type_of(self, dimension: str) -> ColumnType:
        return self.column_types[dimension]


def extract_dimensions(records: Sequence[Mapping[str, object]]) -> list[str]:
    """Column names of the first record, in the order its keys appear."""
    if not records:
        return []
    return list(records[0].keys())


def _present_values(records: Sequence[Mapping[str, object]], dimension: str) -> list[object]:
    return [record.get(dimension) for record in records if record.get(dimension) is not None]


def detect_data_types(
    records: Sequence[Mapping[str, object]],
    dimensions: Sequence[str],
) -> dict[str, ColumnType]:
    """Label a column numeric when all of its present values are finite numbers.

    Columns with no present values at all are nominal.
    """
    types: dict[str, ColumnType] = {}
    for dimension in dimensions:
        values = _present_values(records, dimension)
        is_numeric = bool(values) and all(parse_number(value) is not None for value in values)
        types[dimension] = ColumnType.numeric if is_numeric else ColumnType.nominal
    return types


def infer_schema(
    records: Sequence[Mapping[str, object]],
    definition: DatasetDefinition | None = None,
    *,
    use_static: bool = True,
) -> Schema:
    if use_static and definition is not None and definition.is_static:
        dimensions = tuple(definition.dimensions or ())
        return Schema(
            dimensions=dimensions,
            column_types={name: definition.column_types[name] for name in dimensions},
            static=True,
        )
    dimensions = tuple(extract_dimensions(records))
    return Schema(dimensions=dimensions, column_types=detect_data_types(records, dimensions))


def to_cell(value: object, column_type: ColumnType) -> Cell:
    if value is None:
        return MISSING
    if column_type is ColumnType.numeric:
        number = parse_number(value)
        return MISSING if number is None else Number(number)
    return Text(text_form(value))


def build_rows(
    records: Sequence[Mapping[str, object]],
    schema: Schema,
    *,
    dataset_id: str | None = None,
) -> tuple[Row, ...]:
    """Classify every field of every record once, according to ``schema``."""
    rows: list[Row] = []
    dropped: dict[str, int] = {}
    for record in records:
        row: dict[str, Cell] = {}
        for dimension in schema.dimensions:
            raw = record.get(dimension)
            cell = to_cell(raw, schema.type_of(dimension))
            if cell is MISSING and raw is not None:
                dropped[dimension] = dropped.get(dimension, 0) + 1
            row[dimension] = cell
        rows.append(row)

    for dimension, count in dropped.items():
        log_coerced_values(LOGGER, dataset_id=dataset_id, dimension=dimension, count=count)
    return tuple(rows)
