from __future__ import annotations

from collections.abc import Callable, MutableMapping
from copy import deepcopy
from typing import Any, TypeVar

from parcoords.utils.config import DEFAULT_CONTAINER_WIDTH

SessionStore = MutableMapping[str, Any]
T = TypeVar("T")

CONTROLLER_KEY = "chart_controller"

SESSION_DEFAULTS: dict[str, Any] = {
    CONTROLLER_KEY: None,
    "container_width": DEFAULT_CONTAINER_WIDTH,
    "show_records": False,
}


def _get_store(store: SessionStore | None) -> SessionStore:
    if store is not None:
        return store
    try:
        import streamlit as st  # type: ignore
    except (
        ModuleNotFoundError
    ) as error:  # pragma: no cover - Streamlit only available in app runtime
        raise RuntimeError("Streamlit session state is unavailable outside the app.") from error
    return st.session_state


def ensure_session_defaults(
    store: SessionStore | None = None,
    *,
    defaults: dict[str, Any] | None = None,
) -> SessionStore:
    """Populate default keys without overwriting existing selections."""
    state = _get_store(store)
    baseline = defaults or SESSION_DEFAULTS
    for key, value in baseline.items():
        if key not in state:
            state[key] = deepcopy(value)
    return state


def get_or_create(
    key: str,
    factory: Callable[[], T],
    store: SessionStore | None = None,
) -> T:
    """Return the object stored under ``key``, building it once per session."""
    state = ensure_session_defaults(store)
    existing = state.get(key)
    if existing is None:
        existing = factory()
        state[key] = existing
    return existing
