"""
emt-api — EMT Madrid MobilityLabs client for Python.

Log in, list the bus lines serving a stop and fetch their estimated arrivals.
"""

from emt_api.client import EmtClient
from emt_api.auth import Credentials
from emt_api.session import Session
from emt_api.stops import StopsAPI
from emt_api.errors import EmtError, NetworkError, ServerError, DecodeError, AuthError
from emt_api.models.stop import Line, Stop

__version__ = "0.1.0"
__all__ = [
    "EmtClient",
    "Credentials",
    "Session",
    "StopsAPI",
    "EmtError",
    "NetworkError",
    "ServerError",
    "DecodeError",
    "AuthError",
    "Line",
    "Stop",
]
