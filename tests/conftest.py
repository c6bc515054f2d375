from __future__ import annotations

from pathlib import Path

import pytest

from parcoords.services.controller import ChartController
from parcoords.services.loader import DatasetLoader
from parcoords.utils.config import ChartConfig
from tests.fixtures.datasets import (
    PEOPLE_RECORDS,
    SMALL_RECORDS,
    FakeScheduler,
    write_dataset,
)


@pytest.fixture
def dataset_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    directory = tmp_path / "datasets"
    directory.mkdir()
    monkeypatch.setenv("PARCOORDS_DATASET_DIR", str(directory))
    write_dataset(directory, "small", SMALL_RECORDS)
    write_dataset(directory, "people", PEOPLE_RECORDS)
    return directory


@pytest.fixture
def chart_config(dataset_dir: Path) -> ChartConfig:
    return ChartConfig(dataset_dir=dataset_dir, debounce_ms=250, container_width=1200)


@pytest.fixture
def loader(dataset_dir: Path) -> DatasetLoader:
    return DatasetLoader(dataset_dir)


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def controller(loader: DatasetLoader, chart_config: ChartConfig, scheduler: FakeScheduler) -> ChartController:
    return ChartController(loader, config=chart_config, timer_factory=scheduler)
