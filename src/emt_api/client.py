"""
EmtClient — main SDK entry point.
"""

from datetime import date
from typing import Any, Callable, Optional

import httpx

from emt_api.auth import Credentials
from emt_api.models.stop import Stop
from emt_api.session import Session
from emt_api.stops import StopsAPI
from emt_api.transport.http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, HttpClient


class EmtClient:
    """Blocking EMT Madrid client. Logs in on construction."""

    def __init__(
        self,
        credentials: Credentials,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        zero_pad_dates: bool = False,
        transport: Optional[httpx.BaseTransport] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        self.http = HttpClient(base_url=base_url, timeout=timeout, transport=transport)
        self.session = Session(self.http, credentials)
        self.stops = StopsAPI(self.session, zero_pad_dates=zero_pad_dates, today=today)
        try:
            self.session.login()
        except Exception:
            self.http.close()
            raise

    def login(self) -> None:
        """Log in again, replacing the current token."""
        self.session.login()

    def is_token_active(self) -> None:
        self.session.is_token_active()

    def is_server_up(self) -> bool:
        return self.session.is_server_up()

    def get_stop(self, stop_id: int) -> Stop:
        return self.stops.get(stop_id)

    def refresh_arrivals(self, stop: Stop) -> None:
        self.stops.refresh_arrivals(stop)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "EmtClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
