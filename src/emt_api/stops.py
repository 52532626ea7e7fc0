"""
Bus stops API: lines serving a stop and their estimated arrivals.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, Callable, Optional

from emt_api.errors import DecodeError
from emt_api.models.stop import Line, Stop, arrival_from_raw
from emt_api.session import Session
from emt_api.transport.envelope import ARRIVALS_PATH, STOP_LINES_PATH, extract, require_code

STOP_DETAIL_PATH = "v1/transport/busemtmad/stops/{stop_id}/detail/"
ARRIVALS_PATH_TEMPLATE = "v2/transport/busemtmad/stops/{stop_id}/arrives/{line_id}/"

OK_CODES = ("00",)

logger = logging.getLogger(__name__)


def format_reference_date(day: date, zero_pad: bool = False) -> str:
    """Date field of the arrivals request.

    Unpadded by default ("202531" for 2025-03-01), which is what the
    official client sends. zero_pad=True gives a strict YYYYMMDD.
    """
    if zero_pad:
        return day.strftime("%Y%m%d")
    return f"{day.year}{day.month}{day.day}"


def build_arrivals_body(day: date, zero_pad: bool = False) -> dict[str, str]:
    return {
        "cultureInfo": "EN",
        "Text_StopRequired_YN": "Y",
        "Text_EstimationsRequired_YN": "Y",
        "Text_IncidencesRequired_YN": "Y",
        "DateTime_Referenced_Incidencies_YYYYMMDD": format_reference_date(day, zero_pad),
    }


def _as_list(node: Any, what: str) -> list[Any]:
    if not isinstance(node, list):
        raise DecodeError(f"Expected {what} to be a list, got {type(node).__name__}")
    return node


class StopsAPI:
    def __init__(
        self,
        session: Session,
        zero_pad_dates: bool = False,
        today: Optional[Callable[[], date]] = None,
    ):
        self._session = session
        self._zero_pad_dates = zero_pad_dates
        self._today = today or date.today

    def fetch_lines(self, stop_id: int) -> list[Line]:
        """Lines serving the stop, in the order the server lists them."""
        operation = f"stop {stop_id} detail"
        envelope = self._session.get(STOP_DETAIL_PATH.format(stop_id=stop_id))
        require_code(envelope, OK_CODES, operation=operation)
        raw_lines = _as_list(extract(envelope, STOP_LINES_PATH, operation=operation), "dataLine")
        return [Line.from_raw(raw) for raw in raw_lines]

    def fetch_arrival_times(self, stop_id: int, line_id: str) -> list[timedelta]:
        """Estimated time until each upcoming bus of `line_id` reaches the stop."""
        operation = f"line {line_id} arrivals at stop {stop_id}"
        body = build_arrivals_body(self._today(), zero_pad=self._zero_pad_dates)
        envelope = self._session.post(ARRIVALS_PATH_TEMPLATE.format(stop_id=stop_id, line_id=line_id), body)
        require_code(envelope, OK_CODES, operation=operation)
        raw_arrivals = _as_list(extract(envelope, ARRIVALS_PATH, operation=operation), "Arrive")
        return [arrival_from_raw(raw) for raw in raw_arrivals]

    def get(self, stop_id: int) -> Stop:
        """Fetch a stop with every line's arrival times populated."""
        lines = self.fetch_lines(stop_id)
        for line in lines:
            line.arrival_times = self.fetch_arrival_times(stop_id, line.id)
        logger.debug("Stop %d: %d lines", stop_id, len(lines))
        return Stop(id=stop_id, lines=tuple(lines))

    def refresh_arrivals(self, stop: Stop) -> None:
        """Replace every line's arrival times. Stops at the first failing line;
        lines refreshed before it keep their new values."""
        for line in stop.lines:
            line.arrival_times = self.fetch_arrival_times(stop.id, line.id)
