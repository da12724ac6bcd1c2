"""Exception hierarchy for the ECSM client.

Every failure the library raises derives from :class:`EcsmError`. Each
failure class has its own subclass and can be caught by type.
"""

from http import HTTPStatus


class EcsmError(Exception):
    """Base class for all ECSM client errors."""


class ValidationError(EcsmError, ValueError):
    """Raised when a payload is rejected locally, before any network call."""


class RequestAlreadyExecutedError(EcsmError, RuntimeError):
    """Raised when a request builder is reused after ``do()``."""


class TransportError(EcsmError):
    """Raised when the HTTP call could not be completed.

    Covers connection refusal, DNS failure, broken connections and
    aborted calls. The underlying ``httpx`` exception is chained.
    """

    def __init__(self, message: str, *, method: str = "", path: str = ""):
        super().__init__(message)
        self.method = method
        self.path = path


class RequestTimeoutError(TransportError, TimeoutError):
    """Raised when a call exceeds its deadline."""


class RemoteError(EcsmError):
    """Raised when the server answered but reported a failure.

    Attributes:
        status_code: HTTP status, or the status carried in the response
            envelope when the HTTP status itself was successful.
        message: Server-supplied message, or the raw body text.
        method: HTTP verb of the failed call.
        path: Request path of the failed call.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        method: str = "",
        path: str = "",
    ):
        super().__init__(f"{method} {path} failed with status {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.method = method
        self.path = path

    @property
    def is_not_found(self) -> bool:
        return self.status_code == HTTPStatus.NOT_FOUND

    @property
    def is_conflict(self) -> bool:
        return self.status_code == HTTPStatus.CONFLICT

    @property
    def is_server_error(self) -> bool:
        return self.status_code >= HTTPStatus.INTERNAL_SERVER_ERROR


class DecodeError(EcsmError):
    """Raised when a response body does not match the expected shape."""

    def __init__(self, message: str, *, path: str = ""):
        super().__init__(message)
        self.path = path
