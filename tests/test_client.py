"""EmtClient facade."""

import httpx
import pytest

from conftest import HELLO, LOGIN, WHOAMI
from emt_api import EmtClient
from emt_api.errors import NetworkError, ServerError


def test_logs_in_on_construction(make_client, server):
    client = make_client()
    assert client.session.access_token == "T1"
    assert len(server.sent("GET", LOGIN)) == 1


def test_construction_fails_when_login_fails(server, credentials):
    server.on("GET", LOGIN, {"code": "99", "description": "bad creds"})
    with pytest.raises(ServerError) as exc:
        EmtClient(credentials, transport=server.transport)
    assert exc.value.code == "99"


def test_construction_fails_on_network_error(server, credentials):
    server.on("GET", LOGIN, httpx.ConnectTimeout("timed out"))
    with pytest.raises(NetworkError):
        EmtClient(credentials, transport=server.transport)


def test_custom_base_url(server, credentials):
    server.on("GET", "/api" + LOGIN, {"code": "00", "data": [{"accessToken": "T1"}]})
    with EmtClient(credentials, base_url="https://example.test/api/", transport=server.transport) as client:
        assert client.http.base_url == "https://example.test/api"
    assert server.requests[0].url.host == "example.test"


def test_relogin_and_whoami(make_client, server):
    server.on_sequence(
        "GET", LOGIN,
        (200, {"code": "00", "data": [{"accessToken": "T1"}]}),
        (200, {"code": "00", "data": [{"accessToken": "T9"}]}),
    )
    server.on("GET", WHOAMI, {"code": "02"})
    client = make_client()
    client.login()
    client.is_token_active()
    assert server.sent("GET", WHOAMI)[0].headers["accessToken"] == "T9"


def test_is_server_up(make_client, server):
    server.on("GET", HELLO, "Ok")
    assert make_client().is_server_up()


def test_context_manager_closes(server, credentials):
    with EmtClient(credentials, transport=server.transport) as client:
        assert client.session.authenticated
    assert client.http._client.is_closed
