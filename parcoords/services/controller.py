from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum

from parcoords.services.debounce import Debouncer, TimerFactory
from parcoords.services.loader import DatasetLoader, DatasetLoadError, LoadedDataset
from parcoords.services.renderer import Scene, render_chart
from parcoords.services.svg import scene_to_svg
from parcoords.services.view_model import ViewModel, build_view_model
from parcoords.utils.config import ChartConfig
from parcoords.utils.constants import LOAD_ERROR_MESSAGE
from parcoords.utils.logging import format_event, get_logger, log_event, log_timing, log_warning_event
from parcoords.utils.metrics import measure_render, record_resize

LOGGER = get_logger(__name__)


class ChartState(str, Enum):
    idle = "idle"
    loading = "loading"
    ready = "ready"
    error = "error"


@dataclass(frozen=True)
class RenderedChart:
    view: ViewModel
    scene: Scene
    svg: str
    container_width: float


class ChartController:
    """Drive load -> infer -> scale -> render for one chart container.

    Each selection takes a request token; only the newest token may move the
    controller out of ``loading``, so a slow earlier load can never overwrite a
    newer one. Resizes are debounced and only redraw once a view model exists.
    """

    def __init__(
        self,
        loader: DatasetLoader,
        *,
        config: ChartConfig,
        timer_factory: TimerFactory | None = None,
    ) -> None:
        self.loader = loader
        self.config = config
        self.state = ChartState.idle
        self.active_dataset: str | None = None
        self.view: ViewModel | None = None
        self.chart: RenderedChart | None = None
        self.error: str | None = None
        self.error_detail: str | None = None
        self.container_width: float = config.container_width
        self.render_count = 0
        self._latest_request = 0
        self._lock = threading.RLock()
        self._resize = Debouncer(
            self._on_resize_settled,
            config.debounce_seconds,
            timer_factory=timer_factory,
        )

    def begin_load(self, dataset_id: str) -> int:
        with self._lock:
            self._latest_request += 1
            self.active_dataset = dataset_id
            self.state = ChartState.loading
            token = self._latest_request
        log_event(LOGGER, "chart.load.requested", dataset_id=dataset_id, request=token)
        return token

    def is_current(self, token: int) -> bool:
        with self._lock:
            return token == self._latest_request

    def complete_load(self, token: int, loaded: LoadedDataset) -> bool:
        dataset_id = loaded.definition.id
        with self._lock:
            if not self.is_current(token):
                self._log_stale(token, dataset_id)
                return False
            try:
                view = build_view_model(
                    dataset_id,
                    loaded.records,
                    loaded.definition,
                    use_static=self.config.schema_mode == "auto",
                )
                chart = self._render_view(view)
            except Exception as error:
                LOGGER.exception(
                    format_event("chart.load.build_failed", {"dataset_id": dataset_id, "request": token})
                )
                self.fail_load(token, error)
                return False
            self.view = view
            self.chart = chart
            self.render_count += 1
            self.error = None
            self.error_detail = None
            self.state = ChartState.ready
        log_event(
            LOGGER,
            "chart.load.ready",
            dataset_id=view.dataset_id,
            request=token,
            dimensions=len(view.dimensions),
            records=view.record_count,
        )
        return True

    def fail_load(self, token: int, error: Exception) -> bool:
        with self._lock:
            if not self.is_current(token):
                self._log_stale(token, self.active_dataset)
                return False
            # The previous view model is kept; only the displayed state changes.
            self.state = ChartState.error
            self.error = LOAD_ERROR_MESSAGE
            self.error_detail = str(error)
        log_warning_event(
            LOGGER,
            "chart.load.failed",
            dataset_id=self.active_dataset,
            request=token,
            detail=str(error),
        )
        return True

    def select_dataset(self, dataset_id: str) -> ChartState:
        token = self.begin_load(dataset_id)
        try:
            with log_timing(LOGGER, "chart.load", dataset_id=dataset_id, request=token):
                loaded = self.loader.load(dataset_id)
        except DatasetLoadError as error:
            self.fail_load(token, error)
        else:
            self.complete_load(token, loaded)
        return self.state

    def load_default(self) -> ChartState:
        """Select the configured default dataset on the first run only."""
        dataset_id = self.config.default_dataset
        with self._lock:
            if self.state is not ChartState.idle or not dataset_id:
                return self.state
        return self.select_dataset(dataset_id)

    def notify_resize(self, container_width: float) -> None:
        self._resize.trigger(container_width)

    def wait_for_resize(self, timeout: float | None = None) -> None:
        self._resize.wait(timeout)

    @property
    def resize_pending(self) -> bool:
        return self._resize.pending

    def redraw(self, container_width: float | None = None) -> RenderedChart | None:
        with self._lock:
            if container_width is not None:
                self.container_width = container_width
            if self.view is None:
                return None
            return self._render()

    def _on_resize_settled(self, container_width: float) -> None:
        with self._lock:
            self.container_width = container_width
            dataset_id = self.view.dataset_id if self.view is not None else None
        if dataset_id is None:
            record_resize("skipped", container_width=container_width)
            return
        self.redraw()
        record_resize("redrawn", container_width=container_width, dataset_id=dataset_id)

    def _render(self) -> RenderedChart:
        view = self.view
        assert view is not None
        chart = self._render_view(view)
        self.chart = chart
        self.render_count += 1
        return chart

    def _render_view(self, view: ViewModel) -> RenderedChart:
        with measure_render(dataset_id=view.dataset_id, container_width=self.container_width) as detail:
            scene = render_chart(
                view,
                self.container_width,
                margin=self.config.margin,
                container_padding=self.config.container_padding,
            )
            detail["axes"] = len(scene.axes)
            detail["polylines"] = len(scene.polylines)
            return RenderedChart(
                view=view,
                scene=scene,
                svg=scene_to_svg(scene),
                container_width=self.container_width,
            )

    def _log_stale(self, token: int, dataset_id: str | None) -> None:
        log_event(
            LOGGER,
            "chart.load.stale",
            dataset_id=dataset_id,
            request=token,
            latest=self._latest_request,
        )
