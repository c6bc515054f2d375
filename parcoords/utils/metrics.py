"""Render and resize timings for the chart controller.

Every metric names the dataset and container width it was taken for, so a
slow redraw can be traced back to the record count and layout behind it.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import UTC, datetime
from time import perf_counter
from typing import Any

from parcoords.utils.logging import get_logger, log_event

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class ChartMetric:
    event: str
    dataset_id: str | None = None
    container_width: float | None = None
    elapsed_ms: float | None = None
    detail: Mapping[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "event": self.event,
            "dataset_id": self.dataset_id,
            "container_width": self.container_width,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.elapsed_ms is not None:
            payload["elapsed_ms"] = round(self.elapsed_ms, 3)
        payload.update(self.detail)
        return payload


def emit_chart_metric(
    event: str,
    *,
    dataset_id: str | None = None,
    container_width: float | None = None,
    elapsed_ms: float | None = None,
    **detail: Any,
) -> ChartMetric:
    metric = ChartMetric(
        event=event if event.startswith("chart.") else f"chart.{event}",
        dataset_id=dataset_id,
        container_width=container_width,
        elapsed_ms=None if elapsed_ms is None else max(0.0, elapsed_ms),
        detail=detail,
    )
    payload = metric.to_dict()
    log_event(LOGGER, payload.pop("event"), **payload)
    return metric


def record_resize(
    status: str,
    *,
    container_width: float,
    dataset_id: str | None = None,
) -> ChartMetric:
    """``status`` is ``redrawn`` or ``skipped`` (no dataset loaded yet)."""
    return emit_chart_metric(
        "resize",
        dataset_id=dataset_id,
        container_width=container_width,
        status=status,
    )


@contextmanager
def measure_render(
    *,
    dataset_id: str,
    container_width: float,
) -> Iterator[dict[str, Any]]:
    """Time one render pass; the caller may add scene counts to the yielded dict."""
    detail: dict[str, Any] = {}
    start = perf_counter()
    try:
        yield detail
    finally:
        emit_chart_metric(
            "render.timing",
            dataset_id=dataset_id,
            container_width=container_width,
            elapsed_ms=(perf_counter() - start) * 1000,
            **detail,
        )
