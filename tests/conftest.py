"""Shared fixtures: an in-process fake ECSM server behind httpx.MockTransport."""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest
import structlog

from ecsm_client.clientset import Clientset
from ecsm_client.rest import RESTClient

TEST_PROTOCOL = "http"
TEST_HOST = "ecsm.test"
TEST_PORT = 3001
BASE_URL = f"{TEST_PROTOCOL}://{TEST_HOST}:{TEST_PORT}/api/v1"


def envelope(data: Any = None, status: int = 200, message: str = "success") -> dict[str, Any]:
    """Wrap ``data`` the way the ECSM API does."""
    return {"status": status, "message": message, "data": data}


class FakeServer:
    """Records every request and answers from a queue or a handler function.

    Queued responses are served first, in order. When the queue is empty the
    optional ``handler`` answers; without one, an empty success envelope is
    returned.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] | None = None
        self._queue: list[httpx.Response] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._queue:
            return self._queue.pop(0)
        if self.handler is not None:
            return self.handler(request)
        return httpx.Response(200, json=envelope())

    def reply(self, data: Any = None, status: int = 200, message: str = "success") -> None:
        """Queue a 200 response carrying an envelope."""
        self._queue.append(httpx.Response(200, json=envelope(data, status, message)))

    def reply_raw(self, http_status: int = 200, **kwargs: Any) -> None:
        """Queue an arbitrary response (``json=``, ``text=``, ``content=``)."""
        self._queue.append(httpx.Response(http_status, **kwargs))

    def serve_pages(self, items: list[Any], total: int | None = None, bare: bool = False) -> None:
        """Answer listings by slicing ``items`` according to pageNum/pageSize.

        Args:
            items: Full dataset.
            total: Reported total; defaults to ``len(items)``.
            bare: Return a bare array instead of a page object.
        """

        def handler(request: httpx.Request) -> httpx.Response:
            page_num = int(request.url.params["pageNum"])
            page_size = int(request.url.params["pageSize"])
            start = (page_num - 1) * page_size
            chunk = items[start : start + page_size]
            if bare:
                return httpx.Response(200, json=envelope(chunk))
            page = {
                "total": len(items) if total is None else total,
                "pageNum": page_num,
                "pageSize": page_size,
                "list": chunk,
            }
            return httpx.Response(200, json=envelope(page))

        self.handler = handler

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo any structlog configuration a test installs."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def rest_client(server: FakeServer) -> RESTClient:
    """RESTClient wired to the fake server."""
    client = RESTClient(base_url=BASE_URL, transport=httpx.MockTransport(server))
    yield client
    client.close()


@pytest.fixture
def clientset(rest_client: RESTClient) -> Clientset:
    return Clientset(rest_client)
