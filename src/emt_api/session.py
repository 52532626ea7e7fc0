"""
Session — owns the access token and attaches it to every authenticated call.
"""

import logging
import threading
from typing import Any, Optional

from emt_api.auth import Credentials
from emt_api.errors import AuthError, DecodeError
from emt_api.models.envelope import Envelope
from emt_api.transport.envelope import LOGIN_TOKEN_PATH, extract, is_success_status, require_code
from emt_api.transport.http import HttpClient

LOGIN_PATH = "v3/mobilitylabs/user/login/"
WHOAMI_PATH = "v1/mobilitylabs/user/whoami/"
HELLO_PATH = "v1/hello/"

LOGIN_OK_CODES = ("00", "01")
WHOAMI_OK_CODES = ("02",)

TOKEN_HEADER = "accessToken"

logger = logging.getLogger(__name__)


class Session:
    def __init__(self, http: HttpClient, credentials: Optional[Credentials] = None):
        self._http = http
        self._credentials = credentials
        self._token: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def access_token(self) -> Optional[str]:
        with self._lock:
            return self._token

    @property
    def authenticated(self) -> bool:
        return self.access_token is not None

    def login(self) -> None:
        """Log in with the configured credentials and store the returned token."""
        if self._credentials is None:
            raise AuthError("No credentials configured for login.", code="no_credentials")
        envelope = self._http.get(LOGIN_PATH, headers=self._credentials.headers())
        require_code(envelope, LOGIN_OK_CODES, operation="login")
        token = extract(envelope, LOGIN_TOKEN_PATH, operation="login")
        if not isinstance(token, str) or not token:
            raise DecodeError(f"login: response has no usable accessToken: {token!r}")
        with self._lock:
            self._token = token
        logger.info("Logged in to %s as %s", self._http.base_url, self._credentials.client_id)

    def is_token_active(self) -> None:
        """Raises ServerError unless the server still recognises the token."""
        envelope = self.get(WHOAMI_PATH)
        require_code(envelope, WHOAMI_OK_CODES, operation="whoami")

    def is_server_up(self) -> bool:
        status_code, body = self._http.get_text(HELLO_PATH)
        return is_success_status(status_code) and "Ok" in body

    def get(self, path: str) -> Envelope:
        return self._http.get(path, headers=self._token_header())

    def post(self, path: str, body: dict[str, Any]) -> Envelope:
        return self._http.post(path, body, headers=self._token_header())

    def _token_header(self) -> dict[str, str]:
        token = self.access_token
        if token is None:
            raise AuthError("Not logged in. Call login() first.", code="not_authenticated")
        return {TOKEN_HEADER: token}
