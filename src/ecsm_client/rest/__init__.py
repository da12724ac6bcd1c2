"""ECSM REST transport package.

Provides the HTTP client and the chainable request builder every resource
client is written against.

Exports:
    RESTClient: HTTP client with thread-local connections.
    Request: Chainable verb/resource/name/subresource/param/body builder.
    Response: Executed request that decodes itself into a caller shape.
    RequestSpec: Immutable description of one HTTP call.
    DEFAULT_API_PREFIX: Version prefix appended to the server address.
    DEFAULT_TIMEOUT: Default HTTP request timeout.
"""

from .client import DEFAULT_API_PREFIX, DEFAULT_TIMEOUT, RESTClient, build_base_url
from .request import VERBS, Request, RequestSpec, Response

__all__ = [
    "DEFAULT_API_PREFIX",
    "DEFAULT_TIMEOUT",
    "VERBS",
    "RESTClient",
    "Request",
    "RequestSpec",
    "Response",
    "build_base_url",
]
