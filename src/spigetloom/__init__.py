"""spigetloom: An asynchronous Python client for the Spiget API.

The client builds requests against https://api.spiget.org/v2/, sends them
through an httpx.AsyncClient and returns decoded JSON or raw download bytes.
Failures are raised as CommunicationError or DecodeError.
"""

__version__ = "1.0.0"

from .client import SpigetClient
from .config import SpigetSettings, get_settings
from .dispatcher import Dispatcher
from .endpoints import ENDPOINT_DEFINITIONS, Endpoint
from .exceptions import CommunicationError, DecodeError, SpigetError, ValidationError
from .log_config import configure_logging, disable_logging
from .request_builder import RequestBuilder
from .types import BodyEncoding, DecodeMode, HttpMethod, RequestDescriptor

# Silent unless the application opts in via configure_logging()
disable_logging()

__all__ = [
    "__version__",
    # Core Client
    "SpigetClient",
    "SpigetSettings",
    "get_settings",
    "configure_logging",
    # Pipeline
    "RequestBuilder",
    "Dispatcher",
    "RequestDescriptor",
    "Endpoint",
    "ENDPOINT_DEFINITIONS",
    "BodyEncoding",
    "DecodeMode",
    "HttpMethod",
    # Exceptions
    "SpigetError",
    "CommunicationError",
    "DecodeError",
    "ValidationError",
]
