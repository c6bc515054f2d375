from __future__ import annotations

import logging

import pytest

from parcoords.models.dataset import ColumnType, DatasetDefinition
from parcoords.models.values import MISSING, Number, Text
from parcoords.services.schema import (
    build_rows,
    detect_data_types,
    extract_dimensions,
    infer_schema,
    to_cell,
)


def test_extract_dimensions_uses_first_record_key_order() -> None:
    records = [{"z": 1, "a": "x", "m": None}, {"a": "y", "q": 3}]

    assert extract_dimensions(records) == ["z", "a", "m"]


def test_extract_dimensions_of_empty_dataset() -> None:
    assert extract_dimensions([]) == []


def test_detect_data_types_numeric_and_nominal() -> None:
    records = [
        {"age": 30, "ratio": "0.5", "gender": "M", "code": 1},
        {"age": None, "ratio": 1.5, "gender": "F", "code": "B7"},
        {"age": 41.5, "ratio": "2", "gender": None, "code": 3},
    ]

    types = detect_data_types(records, ["age", "ratio", "gender", "code"])

    assert types == {
        "age": ColumnType.numeric,
        "ratio": ColumnType.numeric,
        "gender": ColumnType.nominal,
        "code": ColumnType.nominal,
    }


def test_all_missing_column_is_nominal() -> None:
    records = [{"empty": None}, {"empty": None}, {}]

    assert detect_data_types(records, ["empty"]) == {"empty": ColumnType.nominal}


def test_non_finite_strings_make_a_column_nominal() -> None:
    records = [{"v": 1}, {"v": "Infinity"}]

    assert detect_data_types(records, ["v"])["v"] is ColumnType.nominal


@pytest.mark.parametrize(
    ("value", "column_type", "expected"),
    [
        (None, ColumnType.numeric, MISSING),
        (None, ColumnType.nominal, MISSING),
        ("2.5", ColumnType.numeric, Number(2.5)),
        (7, ColumnType.nominal, Text("7")),
        ("n/a", ColumnType.numeric, MISSING),
    ],
)
def test_to_cell(value: object, column_type: ColumnType, expected: object) -> None:
    assert to_cell(value, column_type) == expected


def test_generic_and_static_modes_agree_on_matching_data() -> None:
    records = [{"a": 1, "b": "x"}, {"a": 2, "b": "y"}]
    definition = DatasetDefinition(
        id="t",
        label="T",
        filename="datasett.json",
        dimensions=["a", "b"],
        column_types={"a": ColumnType.numeric, "b": ColumnType.nominal},
    )

    generic = infer_schema(records)
    static = infer_schema(records, definition)

    assert static.static is True
    assert generic.static is False
    assert static.dimensions == generic.dimensions
    assert dict(static.column_types) == dict(generic.column_types)
    assert build_rows(records, static) == build_rows(records, generic)


def test_static_mode_can_be_disabled() -> None:
    records = [{"b": "x", "a": 1}]
    definition = DatasetDefinition(
        id="t",
        label="T",
        filename="datasett.json",
        dimensions=["a", "b"],
        column_types={"a": ColumnType.numeric, "b": ColumnType.nominal},
    )

    schema = infer_schema(records, definition, use_static=False)

    assert schema.dimensions == ("b", "a")


def test_static_numeric_column_drops_unparseable_values(caplog: pytest.LogCaptureFixture) -> None:
    records = [{"a": 1}, {"a": "oops"}, {"a": None}]
    definition = DatasetDefinition(
        id="t",
        label="T",
        filename="datasett.json",
        dimensions=["a"],
        column_types={"a": ColumnType.numeric},
    )
    schema = infer_schema(records, definition)

    with caplog.at_level(logging.WARNING):
        rows = build_rows(records, schema, dataset_id="t")

    assert [row["a"] for row in rows] == [Number(1.0), MISSING, MISSING]
    assert any("chart.schema.unparseable_values" in message for message in caplog.messages)
