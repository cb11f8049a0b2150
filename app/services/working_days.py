# app/services/working_days.py
# ---------------------------------
# Working-day labels <-> weekday indices (0=Sunday .. 6=Saturday), and the
# comma-joined text form stored in employees.working_days.
from __future__ import annotations

from datetime import date
from typing import Iterable

from ..errors import InvalidInput

WEEKDAY_LABELS = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

_LABEL_TO_INDEX = {label: i for i, label in enumerate(WEEKDAY_LABELS)}
_LOOKUP = {label.lower(): label for label in WEEKDAY_LABELS}


def to_weekday_indices(labels: Iterable[str] | None) -> set[int]:
    """Map labels to weekday indices. Unknown labels are dropped."""
    return {_LABEL_TO_INDEX[l] for l in (labels or []) if l in _LABEL_TO_INDEX}


def from_weekday_indices(indices: Iterable[int]) -> list[str]:
    out: list[str] = []
    for i in indices:
        # bool is an int subclass; True/False are not weekdays
        if isinstance(i, bool) or not isinstance(i, int) or not 0 <= i <= 6:
            raise InvalidInput(f"Invalid working day number: {i!r}")
        out.append(WEEKDAY_LABELS[i])
    return out


def python_weekday_to_index(d: date) -> int:
    # date.weekday(): Mon=0 .. Sun=6
    return (d.weekday() + 1) % 7


def serialize_working_days(labels: Iterable[str] | None) -> str:
    if labels is None or isinstance(labels, str):
        return ""
    return ",".join(labels)


def parse_working_days(text: str | None) -> list[str]:
    if not text:
        return []
    return [s.strip() for s in text.split(",") if s.strip()]


def normalize_working_days(labels) -> list[str]:
    """
    Validate a working-day list coming from a request.
    Case-insensitive, duplicates collapsed (first wins), order kept.
    """
    if not isinstance(labels, (list, tuple, set)) or not labels:
        raise InvalidInput("At least one working day is required")

    out: list[str] = []
    for raw in labels:
        if not isinstance(raw, str):
            raise InvalidInput(f"Invalid working day: {raw!r}")
        canon = _LOOKUP.get(raw.strip().lower())
        if canon is None:
            raise InvalidInput(f"Invalid working day: {raw!r}")
        if canon not in out:
            out.append(canon)
    return out
