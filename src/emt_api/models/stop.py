"""
Stop and line models built from the stop-detail and arrivals payloads.
"""

from datetime import timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict

from emt_api.errors import DecodeError


def _as_int(raw: dict[str, Any], field: str) -> int:
    try:
        value = raw[field]
    except (KeyError, TypeError):
        raise DecodeError(f"Entry is missing '{field}'")
    if isinstance(value, (bool, float)):
        raise DecodeError(f"Entry has a non-numeric '{field}': {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise DecodeError(f"Entry has a non-numeric '{field}': {value!r}")


class Line(BaseModel):
    """A bus line serving a stop. arrival_times is replaced on every refresh."""

    id: str
    direction: str
    min_freq: timedelta
    max_freq: timedelta
    arrival_times: list[timedelta] = []

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> "Line":
        """Build a line from one `dataLine` entry of the stop-detail payload.

        The entry carries two headers and a `direction` index (0 or 1)
        selecting which of them names the direction at this stop.
        """
        if not isinstance(raw, dict) or "label" not in raw:
            raise DecodeError(f"Line entry has no 'label': {raw!r}")
        label = raw["label"]
        if isinstance(label, bool) or not isinstance(label, (str, int)) or label == "":
            raise DecodeError(f"Line entry has an unusable 'label': {label!r}")

        index = _as_int(raw, "direction")
        headers = [raw.get("header0"), raw.get("header1")]
        if index not in (0, 1):
            raise DecodeError(f"Line {label} has direction index {index}, expected 0 or 1")
        if headers[index] is None:
            raise DecodeError(f"Line {label} is missing 'header{index}'")

        return cls(
            id=str(label),
            direction=str(headers[index]),
            min_freq=timedelta(minutes=_as_int(raw, "minFreq")),
            max_freq=timedelta(minutes=_as_int(raw, "maxFreq")),
        )


def arrival_from_raw(raw: dict[str, Any]) -> timedelta:
    """One `Arrive` entry -> time until arrival."""
    try:
        return timedelta(seconds=_as_int(raw, "estimateArrive"))
    except DecodeError as e:
        raise DecodeError(f"Arrival entry is malformed: {e}")


class Stop(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    lines: tuple[Line, ...] = ()

    def line(self, line_id: str) -> Line:
        for line in self.lines:
            if line.id == line_id:
                return line
        raise KeyError(line_id)
