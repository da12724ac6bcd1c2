"""Client for the service resource.

Services are the deployable units of ECSM. Besides CRUD, the API offers
batch creation from template paths, batch control by id or path label,
redeploy and rollback.
"""

from __future__ import annotations

from ..rest import RESTClient
from .common_types import PathRequest, ValidationResult
from .pagination import TerminationPolicy, list_all
from .service_types import (
    ControlServicesRequest,
    ControlServicesResponse,
    CreateByPathOptions,
    CreateServiceRequest,
    DeleteByPathResult,
    ListServicesOptions,
    ProvisionListRow,
    RedeployRequest,
    RollBackRequest,
    ServiceCreateResponse,
    ServiceDeleteResponse,
    ServiceGet,
    ServiceList,
    ServiceStatistics,
    Transaction,
    UpdateServiceRequest,
    ValidateNameOptions,
)
from .validation import check_action, check_identity

CONTROL_ACTIONS = ("start", "stop", "restart", "pause", "unpause", "destroy")

CREATE_BY_PATH_ACTIONS = ("run", "load")


class ServiceClient:
    """Operations on ``/service``."""

    resource = "service"
    list_policy = TerminationPolicy.COUNT

    def __init__(self, rest_client: RESTClient):
        self._rest = rest_client

    def create(self, service: CreateServiceRequest, timeout: float | None = None) -> ServiceCreateResponse:
        return (
            self._rest.post()
            .resource(self.resource)
            .body(service)
            .do(timeout)
            .into(ServiceCreateResponse)
        )

    def get(self, service_id: str, timeout: float | None = None) -> ServiceGet:
        return self._rest.get().resource(self.resource).name(service_id).do(timeout).into(ServiceGet)

    def list(self, opts: ListServicesOptions, timeout: float | None = None) -> ServiceList:
        """Fetch one page of services."""
        req = self._rest.get().resource(self.resource)
        for key, value in opts.to_params().items():
            req.param(key, value)
        return req.do(timeout).into(ServiceList)

    def list_all(self, opts: ListServicesOptions | None = None, timeout: float | None = None) -> list[ProvisionListRow]:
        """Fetch every service matching ``opts``, across all pages."""
        return list_all(
            lambda page_opts: self.list(page_opts, timeout),
            opts or ListServicesOptions(),
            self.list_policy,
        )

    def update(
        self,
        service_id: str,
        service: UpdateServiceRequest,
        timeout: float | None = None,
    ) -> ServiceCreateResponse:
        """Replace a service definition.

        Raises:
            ValidationError: If ``service_id`` differs from ``service.id``.
        """
        check_identity(service_id, service.id, "service")
        return (
            self._rest.put()
            .resource(self.resource)
            .body(service)
            .do(timeout)
            .into(ServiceCreateResponse)
        )

    def delete(self, service_id: str, timeout: float | None = None) -> ServiceDeleteResponse:
        return (
            self._rest.delete()
            .resource(self.resource)
            .name(service_id)
            .do(timeout)
            .into(ServiceDeleteResponse)
        )

    def create_by_path(
        self,
        opts: CreateByPathOptions,
        timeout: float | None = None,
    ) -> list[ServiceCreateResponse]:
        """Create services from every template under ``opts.paths``."""
        check_action(opts.action, CREATE_BY_PATH_ACTIONS)
        return (
            self._rest.post()
            .resource(self.resource)
            .subresource(opts.action)
            .subresource("templates-path-label")
            .body(opts)
            .do(timeout)
            .into(list[ServiceCreateResponse])
        )

    def delete_by_path(self, path: str, timeout: float | None = None) -> list[DeleteByPathResult]:
        """Delete every service created from templates under ``path``."""
        return (
            self._rest.delete()
            .resource("service/path")
            .body(PathRequest(path=path))
            .do(timeout)
            .into(list[DeleteByPathResult])
        )

    def control_by_id(
        self,
        service_ids: list[str],
        action: str,
        timeout: float | None = None,
    ) -> ControlServicesResponse:
        """Apply ``action`` (start, stop, restart, pause, unpause, destroy) to services by id."""
        check_action(action, CONTROL_ACTIONS)
        return (
            self._rest.post()
            .resource(self.resource)
            .subresource(action)
            .subresource("ids")
            .body(ControlServicesRequest(ids=service_ids))
            .do(timeout)
            .into(ControlServicesResponse)
        )

    def control_by_label(self, path: str, action: str, timeout: float | None = None) -> ControlServicesResponse:
        """Apply ``action`` to every service carrying the path label ``path``."""
        check_action(action, CONTROL_ACTIONS)
        return (
            self._rest.post()
            .resource(self.resource)
            .subresource(action)
            .subresource("path-label")
            .body(PathRequest(path=path))
            .do(timeout)
            .into(ControlServicesResponse)
        )

    def redeploy(self, service_id: str, timeout: float | None = None) -> None:
        (
            self._rest.put()
            .resource("service/deployment/restart")
            .body(RedeployRequest(id=service_id))
            .do(timeout)
            .into(None)
        )

    def validate_name(self, opts: ValidateNameOptions, timeout: float | None = None) -> ValidationResult:
        """Check whether ``opts.name`` can be used for a service.

        The server answers whether the name already exists; an existing
        name is reported as invalid.
        """
        req = self._rest.get().resource("service/name/check").param("name", opts.name)
        if opts.id:
            req.param("id", opts.id)
        name_exists = req.do(timeout).into(bool)

        if name_exists:
            return ValidationResult(
                is_valid=False,
                message=f"service name '{opts.name}' already exists",
            )
        return ValidationResult(is_valid=True)

    def rollback(self, req: RollBackRequest, timeout: float | None = None) -> Transaction:
        """Roll a service back to the deployment record ``req.record_id``."""
        return (
            self._rest.put()
            .resource(self.resource)
            .subresource("rollback")
            .body(req)
            .do(timeout)
            .into(Transaction)
        )

    def get_statistics(self, timeout: float | None = None) -> ServiceStatistics:
        return self._rest.get().resource("service/summary").do(timeout).into(ServiceStatistics)
