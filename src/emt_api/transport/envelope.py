"""
Response interpretation: status check, envelope decoding and payload paths.

Result codes are checked by each caller because the accepted set differs per
endpoint ("00", "01" or "02").
"""

import json
from typing import Any, Collection, Union

from pydantic import ValidationError

from emt_api.errors import DecodeError, NetworkError, ServerError
from emt_api.models.envelope import Envelope

# Payload paths, relative to envelope.data. Fixed by the v1/v2/v3 API.
PathStep = Union[int, str]
LOGIN_TOKEN_PATH: tuple[PathStep, ...] = (0, "accessToken")
STOP_LINES_PATH: tuple[PathStep, ...] = (0, 0, 0, "dataLine")
ARRIVALS_PATH: tuple[PathStep, ...] = (0, "Arrive")


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300


def interpret(status_code: int, body: str) -> Envelope:
    """Turn a completed exchange into an envelope. The body is only decoded for 2xx."""
    if not is_success_status(status_code):
        raise NetworkError(f"HTTP {status_code}: {body[:200]}", status_code=status_code)
    try:
        raw = json.loads(body)
    except ValueError as e:
        raise DecodeError(f"Response body is not JSON: {e}")
    return parse_envelope(raw)


def parse_envelope(raw: Any) -> Envelope:
    try:
        return Envelope.model_validate(raw)
    except ValidationError as e:
        raise DecodeError(f"Response is not a MobilityLabs envelope: {e}")


def require_code(envelope: Envelope, accepted: Collection[str], operation: str) -> Envelope:
    if envelope.code not in accepted:
        raise ServerError(envelope.code, envelope.description, operation=operation)
    return envelope


def extract(envelope: Envelope, path: tuple[PathStep, ...], operation: str) -> Any:
    """Walk `path` into envelope.data, failing loudly when the shape differs."""
    node = envelope.data
    walked = "data"
    for step in path:
        if isinstance(node, str):
            raise DecodeError(f"{operation}: response has no {walked}[{step!r}]")
        try:
            node = node[step]
        except (KeyError, IndexError, TypeError):
            raise DecodeError(f"{operation}: response has no {walked}[{step!r}]")
        walked += f"[{step!r}]"
    return node
