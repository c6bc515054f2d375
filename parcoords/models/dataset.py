from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    field_validator,
    model_validator,
)


class ColumnType(str, Enum):
    """Display type of a column; ``nominal`` is the categorical case."""

    numeric = "numeric"
    nominal = "nominal"


RecordValue = Union[StrictInt, StrictFloat, StrictStr, None]
Record = dict[str, RecordValue]

RECORDS_ADAPTER: TypeAdapter[list[Record]] = TypeAdapter(list[Record])


class DatasetDefinition(BaseModel):
    """A selectable dataset and, optionally, its predeclared schema."""

    id: str
    label: str
    filename: str
    dimensions: list[str] | None = None
    column_types: dict[str, ColumnType] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("id", "label", "filename")
    @classmethod
    def _require_text(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError("id, label and filename must be non-empty")
        return text

    @field_validator("dimensions")
    @classmethod
    def _dedupe_dimensions(cls, dimensions: list[str] | None) -> list[str] | None:
        if dimensions is None:
            return None
        seen: set[str] = set()
        result: list[str] = []
        for name in dimensions:
            if name in seen:
                continue
            seen.add(name)
            result.append(name)
        return result

    @model_validator(mode="after")
    def _check_static_schema(self) -> "DatasetDefinition":
        if self.dimensions is None:
            if self.column_types:
                raise ValueError("column_types require a static dimension list")
            return self
        missing = [name for name in self.dimensions if name not in self.column_types]
        if missing:
            raise ValueError(f"static schema lacks column types for: {', '.join(missing)}")
        unknown = [name for name in self.column_types if name not in self.dimensions]
        if unknown:
            raise ValueError(f"column types given for undeclared dimensions: {', '.join(unknown)}")
        return self

    @property
    def is_static(self) -> bool:
        return self.dimensions is not None
