"""Client for containers (``/container``)."""

from __future__ import annotations

from ..rest import RESTClient
from .container_types import (
    ContainerInfo,
    ContainerList,
    ControlContainersRequest,
    ControlContainersResponse,
    ListContainersOptions,
)
from .pagination import TerminationPolicy, list_all
from .service import CONTROL_ACTIONS
from .validation import check_action


class ContainerClient:
    resource = "container"
    list_policy = TerminationPolicy.COUNT

    def __init__(self, rest_client: RESTClient):
        self._rest = rest_client

    def list(self, opts: ListContainersOptions, timeout: float | None = None) -> ContainerList:
        req = self._rest.get().resource(self.resource)
        for key, value in opts.to_params().items():
            req.param(key, value)
        return req.do(timeout).into(ContainerList)

    def list_all(
        self,
        opts: ListContainersOptions | None = None,
        timeout: float | None = None,
    ) -> list[ContainerInfo]:
        return list_all(
            lambda page_opts: self.list(page_opts, timeout),
            opts or ListContainersOptions(),
            self.list_policy,
        )

    def get(self, container_id: str, timeout: float | None = None) -> ContainerInfo:
        return self._rest.get().resource(self.resource).name(container_id).do(timeout).into(ContainerInfo)

    def control_by_id(
        self,
        container_ids: list[str],
        action: str,
        timeout: float | None = None,
    ) -> ControlContainersResponse:
        """Apply ``action`` to containers by id; same action set as services."""
        check_action(action, CONTROL_ACTIONS)
        return (
            self._rest.post()
            .resource(self.resource)
            .subresource(action)
            .subresource("ids")
            .body(ControlContainersRequest(ids=container_ids))
            .do(timeout)
            .into(ControlContainersResponse)
        )
