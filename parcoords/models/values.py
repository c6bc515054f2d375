"""Tagged cell values.

Every raw record field is classified once by the schema inferencer into a
``Number``, a ``Text`` or ``MISSING``; scales and the renderer work on these
tags and never re-inspect the raw JSON value.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Final, Union


@dataclass(frozen=True, slots=True)
class Number:
    value: float


@dataclass(frozen=True, slots=True)
class Text:
    value: str


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()

Cell = Union[Number, Text, _Missing]


def is_missing(cell: Cell) -> bool:
    return cell is MISSING


def parse_number(value: object) -> float | None:
    """Return ``value`` as a finite float, or ``None`` when it is not one.

    Blank strings count as ``0.0``. Integers too large for a float are not
    finite and therefore not numbers.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
        return number if math.isfinite(number) else None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if "_" in text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def text_form(value: object) -> str:
    """String form used for category labels and their sort order.

    Integral floats print without a fractional part, so ``1.0`` reads ``"1"``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)
