"""
Blocking HTTP client for the MobilityLabs API.
"""

import logging
from typing import Any, Optional

import httpx

from emt_api.errors import NetworkError
from emt_api.models.envelope import Envelope
from emt_api.transport.envelope import interpret

DEFAULT_BASE_URL = "https://openapi.emtmadrid.es"
DEFAULT_TIMEOUT = 30.0

logger = logging.getLogger(__name__)


class HttpClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=f"{self._base_url}/",
            headers={"User-Agent": "emt-api/0.1.0", "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def _send(self, method: str, path: str, headers: dict[str, str], body: Optional[dict[str, Any]] = None) -> httpx.Response:
        logger.debug("%s %s", method, path)
        try:
            resp = self._client.request(method, path.lstrip("/"), headers=headers, json=body)
        except httpx.HTTPError as e:
            raise NetworkError(f"No response from {method} {path}: {e}") from e
        logger.debug("%s %s -> %d", method, path, resp.status_code)
        return resp

    def get(self, path: str, headers: Optional[dict[str, str]] = None) -> Envelope:
        resp = self._send("GET", path, headers or {})
        return interpret(resp.status_code, resp.text)

    def post(self, path: str, body: dict[str, Any], headers: Optional[dict[str, str]] = None) -> Envelope:
        resp = self._send("POST", path, headers or {}, body)
        return interpret(resp.status_code, resp.text)

    def get_text(self, path: str, headers: Optional[dict[str, str]] = None) -> tuple[int, str]:
        """Raw status and body, for endpoints that do not answer with an envelope."""
        resp = self._send("GET", path, headers or {})
        return resp.status_code, resp.text

    def close(self) -> None:
        self._client.close()
