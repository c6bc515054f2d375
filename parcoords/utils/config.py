from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

DEFAULT_DATASET_DIR = Path("./datasets")
DATASET_DIR_ENV = "PARCOORDS_DATASET_DIR"
DEBOUNCE_MS_ENV = "PARCOORDS_DEBOUNCE_MS"
CONTAINER_WIDTH_ENV = "PARCOORDS_CONTAINER_WIDTH"
SCHEMA_MODE_ENV = "PARCOORDS_SCHEMA_MODE"
DEFAULT_DATASET_ENV = "PARCOORDS_DEFAULT_DATASET"

DEFAULT_DEBOUNCE_MS = 250
DEFAULT_CONTAINER_WIDTH = 1200
CONTAINER_PADDING = 40
DEFAULT_DATASET = "2012"

SchemaMode = Literal["auto", "generic"]


@dataclass(frozen=True)
class Margin:
    top: int = 50
    right: int = 180
    bottom: int = 20
    left: int = 180


@dataclass(frozen=True)
class ChartConfig:
    dataset_dir: Path
    debounce_ms: int = DEFAULT_DEBOUNCE_MS
    container_width: int = DEFAULT_CONTAINER_WIDTH
    schema_mode: SchemaMode = "auto"
    margin: Margin = field(default_factory=Margin)
    container_padding: int = CONTAINER_PADDING
    default_dataset: str | None = DEFAULT_DATASET

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000.0


def get_dataset_dir() -> Path:
    return Path(os.getenv(DATASET_DIR_ENV, DEFAULT_DATASET_DIR)).expanduser()


def get_schema_mode() -> SchemaMode:
    mode = (os.getenv(SCHEMA_MODE_ENV) or "auto").strip().lower()
    if mode not in ("auto", "generic"):
        raise ValueError(f"{SCHEMA_MODE_ENV} must be 'auto' or 'generic', got {mode!r}")
    return mode  # type: ignore[return-value]


def get_default_dataset() -> str | None:
    """Dataset shown on first load; an empty value disables the auto-load."""
    value = os.getenv(DEFAULT_DATASET_ENV, DEFAULT_DATASET).strip()
    return value or None


def load_chart_config(dataset_dir: Path | None = None) -> ChartConfig:
    debounce_ms = int(os.getenv(DEBOUNCE_MS_ENV, DEFAULT_DEBOUNCE_MS))
    container_width = int(os.getenv(CONTAINER_WIDTH_ENV, DEFAULT_CONTAINER_WIDTH))
    return ChartConfig(
        dataset_dir=dataset_dir if dataset_dir is not None else get_dataset_dir(),
        debounce_ms=max(0, debounce_ms),
        container_width=max(0, container_width),
        schema_mode=get_schema_mode(),
        default_dataset=get_default_dataset(),
    )
