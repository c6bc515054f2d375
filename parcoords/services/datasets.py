from __future__ import annotations

from collections.abc import Mapping

from parcoords.models.dataset import ColumnType, DatasetDefinition

DATASETS: Mapping[str, DatasetDefinition] = {
    "2012": DatasetDefinition(
        id="2012",
        label="Load 2012 Dataset",
        filename="dataset2012.json",
        dimensions=["gender", "age", "height_cm", "weight_kg", "region"],
        column_types={
            "gender": ColumnType.nominal,
            "age": ColumnType.numeric,
            "height_cm": ColumnType.numeric,
            "weight_kg": ColumnType.numeric,
            "region": ColumnType.nominal,
        },
    ),
    "2019": DatasetDefinition(
        id="2019",
        label="Load 2019 Dataset",
        filename="dataset2019.json",
    ),
}


class UnknownDatasetError(KeyError):
    """Raised when a dataset identifier is not registered."""


def dataset_filename(dataset_id: str) -> str:
    return f"dataset{dataset_id}.json"


def get_dataset_definition(
    dataset_id: str,
    registry: Mapping[str, DatasetDefinition] | None = None,
) -> DatasetDefinition:
    datasets = DATASETS if registry is None else registry
    try:
        return datasets[dataset_id]
    except KeyError as error:
        raise UnknownDatasetError(dataset_id) from error


def list_dataset_definitions(
    registry: Mapping[str, DatasetDefinition] | None = None,
) -> list[DatasetDefinition]:
    datasets = DATASETS if registry is None else registry
    return list(datasets.values())
