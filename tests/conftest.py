"""Shared fixtures: an in-memory MobilityLabs server behind httpx.MockTransport."""

import json
from datetime import date
from typing import Any, Union

import httpx
import pytest

from emt_api import Credentials, EmtClient

LOGIN = "/v3/mobilitylabs/user/login/"
WHOAMI = "/v1/mobilitylabs/user/whoami/"
HELLO = "/v1/hello/"
TODAY = date(2025, 3, 1)


def stop_detail(*lines: dict[str, Any]) -> dict[str, Any]:
    return {"code": "00", "data": [[[{"stop": "1", "dataLine": list(lines)}]]]}


def arrivals(*seconds: Union[int, str]) -> dict[str, Any]:
    return {"code": "00", "data": [{"Arrive": [{"estimateArrive": s} for s in seconds]}]}


def raw_line(label: str, direction: Any = 0, header0: str = "To A", header1: str = "To B",
             min_freq: Any = "5", max_freq: Any = "10") -> dict[str, Any]:
    return {"label": label, "direction": direction, "header0": header0, "header1": header1,
            "minFreq": min_freq, "maxFreq": max_freq}


class FakeEmt:
    """Answers by (method, path). A route maps to a status and a JSON payload or raw text,
    or to a list of such answers consumed in order."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], Any] = {
            ("GET", LOGIN): (200, {"code": "00", "data": [{"accessToken": "T1"}]}),
        }

    def on(self, method: str, path: str, payload: Any, status: int = 200) -> None:
        self.routes[(method, path)] = (status, payload)

    def on_sequence(self, method: str, path: str, *answers: tuple[int, Any]) -> None:
        self.routes[(method, path)] = list(answers)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, text="no route")
        if isinstance(route, list):
            route = route.pop(0) if len(route) > 1 else route[0]
        status, payload = route
        if isinstance(payload, Exception):
            raise payload
        if isinstance(payload, str):
            return httpx.Response(status, text=payload)
        return httpx.Response(status, json=payload)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def sent(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    @staticmethod
    def body(request: httpx.Request) -> dict[str, Any]:
        return json.loads(request.content)


@pytest.fixture
def server() -> FakeEmt:
    return FakeEmt()


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(client_id="client-1", pass_key="secret-1")


@pytest.fixture
def make_client(server, credentials):
    clients = []

    def _make(**kwargs: Any) -> EmtClient:
        kwargs.setdefault("today", lambda: TODAY)
        client = EmtClient(credentials, transport=server.transport, **kwargs)
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()
