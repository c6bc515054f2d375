from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

# Ensure package imports work when launched as a file via `streamlit run parcoords/main.py`.
ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from parcoords.services.controller import ChartController, ChartState  # noqa: E402
from parcoords.services.datasets import list_dataset_definitions  # noqa: E402
from parcoords.services.loader import DatasetLoader  # noqa: E402
from parcoords.services.summary import records_frame, schema_summary  # noqa: E402
from parcoords.ui.styles import apply_chart_styles, chart_html, error_html  # noqa: E402
from parcoords.utils.config import ChartConfig, load_chart_config  # noqa: E402
from parcoords.utils.logging import get_logger, log_event  # noqa: E402
from parcoords.utils.session_state import (  # noqa: E402
    CONTROLLER_KEY,
    SESSION_DEFAULTS,
    ensure_session_defaults,
    get_or_create,
)

APP_TITLE = "Parallel Coordinates"
PREVIEW_ROWS = 50

LOGGER = get_logger(__name__)


def _build_controller(config: ChartConfig) -> ChartController:
    return ChartController(DatasetLoader(config.dataset_dir), config=config)


def render_dataset_buttons(controller: ChartController) -> None:
    definitions = list_dataset_definitions()
    columns = st.columns(len(definitions))
    for column, definition in zip(columns, definitions):
        is_active = controller.active_dataset == definition.id
        clicked = column.button(
            definition.label,
            key=f"btn-{definition.id}",
            type="primary" if is_active else "secondary",
            use_container_width=True,
        )
        if clicked:
            with st.spinner(f"Loading {definition.filename}..."):
                controller.select_dataset(definition.id)
            # Rerun so the highlighted button follows the new selection.
            st.rerun()


def sync_container_width(controller: ChartController, width: int) -> None:
    if width == controller.container_width and not controller.resize_pending:
        return
    controller.notify_resize(width)
    # A newer slider event interrupts this run, which abandons the wait; the next
    # run's notify_resize then cancels the timer scheduled here.
    controller.wait_for_resize(timeout=controller.config.debounce_seconds + 1.0)


def render_chart_area(controller: ChartController) -> None:
    if controller.state is ChartState.error:
        st.markdown(error_html(controller.error or ""), unsafe_allow_html=True)
        if controller.error_detail:
            st.caption(controller.error_detail)
        return
    chart = controller.chart
    if chart is None:
        st.info("Choose a dataset above to draw the chart.")
        return
    st.markdown(chart_html(chart.svg), unsafe_allow_html=True)


def render_details(controller: ChartController, *, show_records: bool) -> None:
    view = controller.view
    if view is None or controller.state is not ChartState.ready:
        return
    with st.expander("Axes", expanded=False):
        mode = "static schema" if view.static_schema else "inferred from data"
        st.caption(f"Dataset {view.dataset_id}: {len(view.dimensions)} axes, {mode}.")
        st.dataframe(schema_summary(view), use_container_width=True, hide_index=True)
    if show_records:
        st.subheader("Records")
        st.dataframe(records_frame(view, limit=PREVIEW_ROWS), use_container_width=True, hide_index=True)
        if view.record_count > PREVIEW_ROWS:
            st.caption(f"Showing the first {PREVIEW_ROWS} of {view.record_count} records.")


def run() -> None:
    st.set_page_config(page_title=APP_TITLE, page_icon="📈", layout="wide")
    config = load_chart_config()
    state = ensure_session_defaults(defaults={**SESSION_DEFAULTS, "container_width": config.container_width})
    controller = get_or_create(CONTROLLER_KEY, lambda: _build_controller(config))

    with st.sidebar:
        st.header("Layout")
        width = st.slider(
            "Container width (px)",
            min_value=400,
            max_value=3000,
            key="container_width",
            step=20,
        )
        st.checkbox("Show records", key="show_records")
        st.divider()
        st.caption(f"Datasets are read from `{config.dataset_dir}`.")

    st.title(APP_TITLE)
    st.caption("Each line is one record; axes are the dataset's columns in file order.")
    apply_chart_styles()
    controller.load_default()
    render_dataset_buttons(controller)
    sync_container_width(controller, width)
    render_chart_area(controller)
    render_details(controller, show_records=bool(state.get("show_records")))
    log_event(
        LOGGER,
        "streamlit.chart.rendered",
        state=controller.state.value,
        dataset_id=controller.active_dataset,
        renders=controller.render_count,
    )


if __name__ == "__main__":
    run()
