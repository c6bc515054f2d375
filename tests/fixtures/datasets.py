from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

SMALL_RECORDS: tuple[dict[str, object], ...] = (
    {"a": 1, "b": "x"},
    {"a": 2, "b": "y"},
    {"a": 3, "b": "x"},
)

PEOPLE_RECORDS: tuple[dict[str, object], ...] = (
    {"gender": "M", "age": 30, "score": 2.0, "team": "red"},
    {"gender": "F", "age": 40, "score": 3.0, "team": "blue"},
    {"gender": "X", "age": None, "score": 4.0, "team": "red"},
    {"gender": None, "age": 50, "score": None, "team": None},
)


def write_dataset(
    directory: Path,
    dataset_id: str,
    records: Sequence[Mapping[str, object]] | str,
) -> Path:
    path = directory / f"dataset{dataset_id}.json"
    payload = records if isinstance(records, str) else json.dumps(list(records))
    path.write_text(payload, encoding="utf-8")
    return path


@dataclass
class FakeTimer:
    delay: float
    function: Callable[[], Any]
    due: float
    started: bool = False
    cancelled: bool = False
    fired: bool = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def join(self, timeout: float | None = None) -> None:
        return None


@dataclass
class FakeScheduler:
    """Manual clock standing in for ``threading.Timer``."""

    now: float = 0.0
    timers: list[FakeTimer] = field(default_factory=list)

    def __call__(self, delay: float, function: Callable[[], Any]) -> FakeTimer:
        timer = FakeTimer(delay=delay, function=function, due=self.now + delay)
        self.timers.append(timer)
        return timer

    def advance(self, seconds: float) -> None:
        self.now += seconds
        for timer in list(self.timers):
            if timer.started and not timer.cancelled and not timer.fired and timer.due <= self.now:
                timer.fired = True
                timer.function()

    @property
    def live(self) -> list[FakeTimer]:
        return [timer for timer in self.timers if not timer.cancelled and not timer.fired]
