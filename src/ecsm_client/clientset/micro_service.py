"""Client for the micro-service resource."""

from __future__ import annotations

from ..rest import RESTClient
from .micro_service_types import (
    MASTER_SLAVE,
    ListMicroServicesOptions,
    MicroServiceGet,
    MicroServiceList,
    MicroServiceListRow,
    UpdateMicroServiceRequest,
)
from .pagination import TerminationPolicy, list_all
from .validation import check_load_balance


class MicroServiceClient:
    """Operations on ``/micro-service``."""

    resource = "micro-service"
    list_policy = TerminationPolicy.COUNT

    def __init__(self, rest_client: RESTClient):
        self._rest = rest_client

    def list(self, opts: ListMicroServicesOptions, timeout: float | None = None) -> MicroServiceList:
        req = self._rest.get().resource(self.resource)
        for key, value in opts.to_params().items():
            req.param(key, value)
        return req.do(timeout).into(MicroServiceList)

    def list_all(
        self,
        opts: ListMicroServicesOptions | None = None,
        timeout: float | None = None,
    ) -> list[MicroServiceListRow]:
        return list_all(
            lambda page_opts: self.list(page_opts, timeout),
            opts or ListMicroServicesOptions(),
            self.list_policy,
        )

    def get(self, micro_service_id: str, timeout: float | None = None) -> MicroServiceGet:
        return (
            self._rest.get()
            .resource(self.resource)
            .name(micro_service_id)
            .do(timeout)
            .into(MicroServiceGet)
        )

    def update(self, micro_service: UpdateMicroServiceRequest, timeout: float | None = None) -> None:
        """Change the load-balancing strategy of a micro-service.

        ``load_balance_detail`` must be given for ``masterSlave`` and must
        be empty for any other strategy.

        Raises:
            ValidationError: If the detail list does not fit the strategy.
        """
        check_load_balance(
            micro_service.load_balance,
            micro_service.load_balance_detail,
            MASTER_SLAVE,
        )
        if not micro_service.load_balance_detail:
            # an empty list is not sent at all
            micro_service = micro_service.model_copy(update={"load_balance_detail": None})
        self._rest.put().resource(self.resource).body(micro_service).do(timeout).into(None)
