"""ECSM REST API client.

Owns the HTTP transport and hands out :class:`~.request.Request` builders.
The connection settings are fixed at construction, so one instance can be
shared by every resource client and across threads.
"""

import threading
import time
from typing import Any

import httpx
import structlog

from ..errors import RequestTimeoutError, TransportError
from .request import Request, RequestSpec, Response, serialize_body

logger = structlog.get_logger(__name__)

DEFAULT_API_PREFIX = "/api/v1"

DEFAULT_TIMEOUT = 30.0


def build_base_url(protocol: str, host: str, port: str | int, api_prefix: str = DEFAULT_API_PREFIX) -> str:
    """Render ``protocol://host:port/prefix``."""
    if not host:
        msg = "host cannot be empty"
        raise ValueError(msg)
    prefix = "/" + api_prefix.strip("/") if api_prefix.strip("/") else ""
    return f"{protocol}://{host}:{port}{prefix}"


class RESTClient:
    """HTTP client for the ECSM REST API.

    Thread-safe through thread-local storage of httpx.Client instances.
    Can be used as a context manager for automatic cleanup.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the REST client.

        Args:
            base_url: API root including the version prefix
                (e.g., "http://localhost:3001/api/v1").
            timeout: Default request timeout in seconds (default: 30.0).
            headers: Extra headers sent with every request.
            transport: Optional httpx transport, mainly for tests.

        Raises:
            ValueError: If base_url is empty or timeout is not positive.
        """
        if not base_url:
            msg = "base_url cannot be empty"
            raise ValueError(msg)
        if timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)

        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

        self._headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if headers:
            self._headers.update(headers)

        # Use thread-local storage for httpx.Client (thread safety)
        self._local = threading.local()

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def client(self) -> httpx.Client:
        """Get or create the thread-local httpx client."""
        if not hasattr(self._local, "client") or self._local.client.is_closed:
            self._local.client = httpx.Client(
                base_url=self.base_url,
                headers=self._headers,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._local.client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Close the calling thread's HTTP client; other threads keep theirs."""
        if hasattr(self._local, "client") and not self._local.client.is_closed:
            self._local.client.close()

    def verb(self, method: str) -> Request:
        return Request(self, method)

    def get(self) -> Request:
        return Request(self, "GET")

    def post(self) -> Request:
        return Request(self, "POST")

    def put(self) -> Request:
        return Request(self, "PUT")

    def delete(self) -> Request:
        return Request(self, "DELETE")

    def execute(self, spec: RequestSpec, timeout: float | None = None) -> Response:
        """Send one request and wrap the outcome.

        Transport failures are captured in the returned :class:`Response`
        rather than raised, so they surface when the caller decodes it.
        """
        start_time = time.time()
        kwargs: dict[str, Any] = {"params": spec.params}
        if spec.has_body:
            kwargs["json"] = serialize_body(spec.body)
        if timeout is not None:
            kwargs["timeout"] = timeout

        logger.debug(
            "Making API request",
            method=spec.method,
            path=spec.path,
            params=spec.params,
        )
        try:
            http_response = self.client.request(spec.method, spec.path, **kwargs)
        except httpx.TimeoutException as err:
            logger.exception(
                "API request timed out",
                method=spec.method,
                path=spec.path,
                duration_seconds=round(time.time() - start_time, 3),
            )
            error: TransportError = RequestTimeoutError(
                f"{spec.method} {spec.path} timed out: {err}",
                method=spec.method,
                path=spec.path,
            )
            error.__cause__ = err
            return Response(spec, error=error)
        except httpx.RequestError as err:
            logger.exception(
                "API request failed",
                method=spec.method,
                path=spec.path,
                duration_seconds=round(time.time() - start_time, 3),
            )
            error = TransportError(
                f"{spec.method} {spec.path} failed: {err}",
                method=spec.method,
                path=spec.path,
            )
            error.__cause__ = err
            return Response(spec, error=error)

        logger.debug(
            "API request completed",
            method=spec.method,
            path=spec.path,
            status_code=http_response.status_code,
            duration_seconds=round(time.time() - start_time, 3),
        )
        return Response(spec, http_response=http_response)
