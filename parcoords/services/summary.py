from __future__ import annotations

import pandas as pd

from parcoords.models.values import is_missing
from parcoords.services.scales import LinearScale, PointScale
from parcoords.services.view_model import ViewModel

SUMMARY_COLUMNS = ["Dimension", "Type", "Present", "Missing", "Domain"]


def _domain_label(view: ViewModel, dimension: str) -> str:
    scale = view.scales[dimension]
    if isinstance(scale, LinearScale):
        if scale.degenerate:
            return f"{scale.domain_min:.2f}"
        return f"{scale.domain_min:.2f} – {scale.domain_max:.2f}"
    if isinstance(scale, PointScale):
        return ", ".join(scale.domain)
    return ""


def schema_summary(view: ViewModel) -> pd.DataFrame:
    """One row per axis: inferred type, how many records plot on it, and its domain."""
    if not view.dimensions:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    rows = []
    for dimension in view.dimensions:
        present = sum(1 for row in view.rows if not is_missing(row[dimension]))
        rows.append(
            {
                "Dimension": dimension,
                "Type": view.column_types[dimension].value,
                "Present": present,
                "Missing": view.record_count - present,
                "Domain": _domain_label(view, dimension),
            }
        )
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def records_frame(view: ViewModel, *, limit: int | None = None) -> pd.DataFrame:
    records = view.records if limit is None else view.records[:limit]
    frame = pd.DataFrame(list(records), columns=list(view.dimensions))
    return frame
