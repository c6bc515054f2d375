from __future__ import annotations

import pytest
from pydantic import ValidationError

from parcoords.models.dataset import ColumnType, DatasetDefinition
from parcoords.services.datasets import (
    DATASETS,
    UnknownDatasetError,
    dataset_filename,
    get_dataset_definition,
    list_dataset_definitions,
)


def test_dimensions_are_deduplicated_in_order() -> None:
    definition = DatasetDefinition(
        id="d",
        label="D",
        filename="datasetd.json",
        dimensions=["b", "a", "b"],
        column_types={"a": "numeric", "b": "nominal"},
    )

    assert definition.dimensions == ["b", "a"]
    assert definition.column_types["a"] is ColumnType.numeric
    assert definition.is_static


def test_generic_definition_has_no_schema() -> None:
    definition = DatasetDefinition(id=" g ", label="G", filename="datasetg.json")

    assert definition.id == "g"
    assert not definition.is_static


@pytest.mark.parametrize(
    "kwargs",
    [
        {"dimensions": ["a", "b"], "column_types": {"a": "numeric"}},
        {"dimensions": ["a"], "column_types": {"a": "numeric", "z": "nominal"}},
        {"column_types": {"a": "numeric"}},
        {"dimensions": ["a"], "column_types": {"a": "ordinal"}},
    ],
)
def test_inconsistent_static_schema_is_rejected(kwargs: dict) -> None:
    with pytest.raises(ValidationError):
        DatasetDefinition(id="d", label="D", filename="datasetd.json", **kwargs)


def test_blank_label_is_rejected() -> None:
    with pytest.raises(ValidationError):
        DatasetDefinition(id="d", label="  ", filename="datasetd.json")


def test_registry_has_both_bundled_datasets() -> None:
    assert [definition.id for definition in list_dataset_definitions()] == ["2012", "2019"]
    assert get_dataset_definition("2012").is_static
    assert not get_dataset_definition("2019").is_static
    assert all(definition.filename == dataset_filename(key) for key, definition in DATASETS.items())


def test_unknown_dataset_lookup() -> None:
    with pytest.raises(UnknownDatasetError):
        get_dataset_definition("1984")
