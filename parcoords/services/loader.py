from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from parcoords.models.dataset import RECORDS_ADAPTER, DatasetDefinition, Record
from parcoords.services.datasets import (
    UnknownDatasetError,
    dataset_filename,
    get_dataset_definition,
)
from parcoords.utils.logging import get_logger, log_event

LOGGER = get_logger(__name__)


class DatasetLoadError(RuntimeError):
    """Raised when a dataset cannot be read or does not have the expected shape."""

    def __init__(self, dataset_id: str, message: str) -> None:
        super().__init__(f"dataset {dataset_id}: {message}")
        self.dataset_id = dataset_id
        self.detail = message


@dataclass(frozen=True)
class LoadedDataset:
    definition: DatasetDefinition
    records: tuple[Record, ...]


class DatasetLoader:
    """Read ``dataset{id}.json`` files from a directory and validate their shape."""

    def __init__(
        self,
        dataset_dir: Path,
        *,
        registry: Mapping[str, DatasetDefinition] | None = None,
    ) -> None:
        self.dataset_dir = dataset_dir
        self.registry = registry

    def resolve(self, dataset_id: str) -> DatasetDefinition:
        try:
            return get_dataset_definition(dataset_id, self.registry)
        except UnknownDatasetError:
            # Unregistered identifiers still map to a conventional filename.
            return DatasetDefinition(
                id=dataset_id,
                label=f"Dataset {dataset_id}",
                filename=dataset_filename(dataset_id),
            )

    def path_for(self, definition: DatasetDefinition) -> Path:
        return self.dataset_dir / definition.filename

    def load(self, dataset_id: str) -> LoadedDataset:
        if not dataset_id.strip():
            raise DatasetLoadError(dataset_id, "empty dataset identifier")
        definition = self.resolve(dataset_id)
        path = self.path_for(definition)
        try:
            raw = path.read_bytes()
        except OSError as error:
            raise DatasetLoadError(dataset_id, f"cannot read {path}: {error}") from error

        try:
            records = RECORDS_ADAPTER.validate_json(raw)
        except ValidationError as error:
            raise DatasetLoadError(
                dataset_id,
                f"{path.name} is not an array of flat records ({error.error_count()} errors)",
            ) from error

        log_event(
            LOGGER,
            "chart.dataset.loaded",
            dataset_id=dataset_id,
            path=str(path),
            record_count=len(records),
        )
        return LoadedDataset(definition=definition, records=tuple(records))
