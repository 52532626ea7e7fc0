"""
EMT API error types.

Two tiers: NetworkError when the exchange itself failed, ServerError when the
exchange completed but the operator rejected it.
"""

from typing import Any, Optional


class EmtError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class NetworkError(EmtError):
    """No response, or a non-2xx HTTP status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__("network_error", message, {"status_code": status_code})
        self.status_code = status_code


class ServerError(EmtError):
    """The operator's result code is not one the operation accepts."""

    def __init__(self, code: str, description: Optional[str] = None, operation: str = "request"):
        message = f"{operation} failed with code {code}"
        if description:
            message += f": {description}"
        super().__init__(code, message, {"description": description, "operation": operation})
        self.description = description
        self.operation = operation


class DecodeError(EmtError):
    def __init__(self, message: str):
        super().__init__("decode_error", message)


class AuthError(EmtError):
    def __init__(self, message: str, code: str = "auth_error"):
        super().__init__(code, message)
