"""Chainable request builder and its response wrapper.

A :class:`Request` accumulates verb, path segments, query parameters and an
optional body, then executes exactly once through its :class:`RESTClient`.
The resulting :class:`Response` decodes itself into whatever shape the
caller asks for.
"""

from __future__ import annotations

import functools
import urllib.parse
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import TYPE_CHECKING, Any, TypeVar, overload

import httpx
import pydantic
import structlog
from pydantic_core import to_jsonable_python

from ..errors import (
    DecodeError,
    RemoteError,
    RequestAlreadyExecutedError,
    TransportError,
    ValidationError,
)

if TYPE_CHECKING:
    from .client import RESTClient

logger = structlog.get_logger(__name__)

T = TypeVar("T")

VERBS = ("GET", "POST", "PUT", "DELETE")

# Keys of the {"status", "message", "data"} wrapper the ECSM API puts around
# most payloads.
ENVELOPE_KEYS = frozenset({"status", "message", "data"})
ENVELOPE_OK = (0, HTTPStatus.OK)


class _NoBody:
    def __repr__(self) -> str:
        return "NO_BODY"


NO_BODY: Any = _NoBody()


@dataclass(frozen=True)
class RequestSpec:
    """Immutable description of one HTTP call."""

    method: str
    segments: tuple[str, ...]
    params: dict[str, str] = field(default_factory=dict)
    body: Any = NO_BODY

    @property
    def path(self) -> str:
        return "/" + "/".join(self.segments)

    @property
    def has_body(self) -> bool:
        return self.body is not NO_BODY


def _format_param(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _clean_segment(segment: str, what: str) -> str:
    cleaned = str(segment).strip("/")
    if not cleaned:
        msg = f"{what} segment cannot be empty"
        raise ValidationError(msg)
    return cleaned


def _quote_segment(segment: str, what: str) -> str:
    # Identifiers may contain "/", "?" or "#"; each must stay one segment
    return urllib.parse.quote(_clean_segment(segment, what), safe="")


def serialize_body(body: Any) -> Any:
    """Convert a request payload into JSON-compatible data.

    Pydantic models are dumped with their wire aliases and without unset
    optional fields; plain containers of models are converted the same way.
    """
    if isinstance(body, pydantic.BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return to_jsonable_python(body, by_alias=True, exclude_none=True)


class Request:
    """Builder for a single ECSM API call.

    Every configuration method returns the builder itself so calls can be
    chained::

        client.post().resource("service").subresource("stop").subresource("ids")

    Segments are appended in call order, producing ``/resource/name/sub1/...``.
    Repeated :meth:`param` calls for one key keep the last value.
    """

    def __init__(self, client: RESTClient, method: str):
        method = method.upper()
        if method not in VERBS:
            msg = f"unsupported HTTP verb '{method}', must be one of {list(VERBS)}"
            raise ValidationError(msg)
        self._client = client
        self._method = method
        self._resource: list[str] = []
        self._name: str | None = None
        self._subresources: list[str] = []
        self._params: dict[str, str] = {}
        self._body: Any = NO_BODY
        self._executed = False

    def _check_open(self) -> None:
        if self._executed:
            msg = f"{self._method} request has already been executed"
            raise RequestAlreadyExecutedError(msg)

    def resource(self, path: str) -> Request:
        """Set the primary resource path, e.g. ``service`` or ``service/record``."""
        self._check_open()
        self._resource = [_clean_segment(part, "resource") for part in path.strip("/").split("/")]
        return self

    def name(self, identifier: str) -> Request:
        """Address a single resource by appending its identifier."""
        self._check_open()
        self._name = _quote_segment(identifier, "name")
        return self

    def subresource(self, segment: str) -> Request:
        self._check_open()
        self._subresources.append(_quote_segment(segment, "subresource"))
        return self

    def param(self, key: str, value: Any) -> Request:
        self._check_open()
        self._params[key] = _format_param(value)
        return self

    def body(self, payload: Any) -> Request:
        self._check_open()
        self._body = payload
        return self

    @property
    def spec(self) -> RequestSpec:
        """Snapshot of the request as configured so far.

        Raises:
            ValidationError: If no resource has been set.
        """
        if not self._resource:
            msg = f"{self._method} request has no resource"
            raise ValidationError(msg)
        segments = list(self._resource)
        if self._name is not None:
            segments.append(self._name)
        segments.extend(self._subresources)
        return RequestSpec(
            method=self._method,
            segments=tuple(segments),
            params=dict(self._params),
            body=self._body,
        )

    def do(self, timeout: float | None = None) -> Response:
        """Execute the request.

        Args:
            timeout: Deadline in seconds for this call; defaults to the
                client timeout.

        Returns:
            The :class:`Response`; transport failures are reported when it
            is decoded.

        Raises:
            RequestAlreadyExecutedError: If called a second time.
            ValidationError: If the request is incomplete.
        """
        self._check_open()
        spec = self.spec
        self._executed = True
        return self._client.execute(spec, timeout=timeout)


@functools.lru_cache(maxsize=256)
def _adapter(shape: Any) -> pydantic.TypeAdapter:
    return pydantic.TypeAdapter(shape)


class Response:
    """Outcome of one executed :class:`Request`.

    Holds either the HTTP response or the transport error that prevented
    one. Nothing is raised until the caller decodes it.
    """

    def __init__(
        self,
        spec: RequestSpec,
        http_response: httpx.Response | None = None,
        error: TransportError | None = None,
    ):
        if (http_response is None) == (error is None):
            msg = "Response needs exactly one of http_response or error"
            raise ValueError(msg)
        self.spec = spec
        self._http = http_response
        self.error = error

    @property
    def status_code(self) -> int | None:
        return self._http.status_code if self._http is not None else None

    def _raise_for_status(self) -> httpx.Response:
        if self.error is not None:
            raise self.error
        http = self._http
        if http.is_success:
            return http

        message = http.reason_phrase
        try:
            payload = http.json()
        except ValueError:
            if http.text:
                message = http.text
        else:
            if isinstance(payload, dict) and payload.get("message"):
                message = str(payload["message"])
        logger.warning(
            "API request rejected",
            method=self.spec.method,
            path=self.spec.path,
            status_code=http.status_code,
            error_message=message,
        )
        raise RemoteError(
            http.status_code,
            message,
            method=self.spec.method,
            path=self.spec.path,
        )

    def _unwrap(self, payload: Any) -> Any:
        if not (
            isinstance(payload, dict)
            and "data" in payload
            and payload.keys() <= ENVELOPE_KEYS
        ):
            return payload

        status = payload.get("status", HTTPStatus.OK)
        if status not in ENVELOPE_OK:
            message = str(payload.get("message") or "")
            logger.warning(
                "API returned error envelope",
                method=self.spec.method,
                path=self.spec.path,
                status=status,
                error_message=message,
            )
            raise RemoteError(
                status if isinstance(status, int) else HTTPStatus.INTERNAL_SERVER_ERROR,
                message or str(status),
                method=self.spec.method,
                path=self.spec.path,
            )
        return payload["data"]

    def _json(self, http: httpx.Response) -> Any:
        if not http.content:
            return None
        try:
            return http.json()
        except ValueError as err:
            msg = f"response from {self.spec.path} is not valid JSON"
            raise DecodeError(msg, path=self.spec.path) from err

    def raw(self) -> Any:
        """Return the unwrapped JSON payload without shape checking."""
        http = self._raise_for_status()
        return self._unwrap(self._json(http))

    @overload
    def into(self, shape: None = None) -> None: ...

    @overload
    def into(self, shape: type[T]) -> T: ...

    @overload
    def into(self, shape: Any) -> Any: ...

    def into(self, shape: Any = None) -> Any:
        """Decode the payload into ``shape``.

        ``shape`` is anything pydantic can validate against: a model class,
        ``list[Model]``, ``bool``, ``Any``. With ``shape=None`` the body is
        discarded after checking that the call succeeded.

        Raises:
            TransportError: If the call never reached the server.
            RemoteError: If the server reported a failure.
            DecodeError: If the payload does not fit ``shape``.
        """
        http = self._raise_for_status()
        if shape is None:
            if "json" in http.headers.get("content-type", ""):
                self._unwrap(self._json(http))
            return None

        payload = self._unwrap(self._json(http))
        try:
            return _adapter(shape).validate_python(payload)
        except pydantic.ValidationError as err:
            msg = (
                f"cannot decode response from {self.spec.path} "
                f"into {getattr(shape, '__name__', shape)!s}: {err}"
            )
            raise DecodeError(msg, path=self.spec.path) from err
