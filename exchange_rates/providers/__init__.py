"""Transport interface and request plumbing for the rate provider."""

from .base import Transport
from .http_client import DEFAULT_BASE_URL, HTTPClient, HTTPClientConfig
from .request_builder import QUERY_KEYS, RequestBuilder

__all__ = [
    "DEFAULT_BASE_URL",
    "HTTPClient",
    "HTTPClientConfig",
    "QUERY_KEYS",
    "RequestBuilder",
    "Transport",
]
