"""Client for nodes (``/node``)."""

from __future__ import annotations

from ..rest import RESTClient
from .common_types import ValidationResult
from .node_types import ListNodesOptions, NodeGet, NodeList, NodeListRow
from .pagination import TerminationPolicy, list_all


class NodeClient:
    resource = "node"
    list_policy = TerminationPolicy.COUNT

    def __init__(self, rest_client: RESTClient):
        self._rest = rest_client

    def list(self, opts: ListNodesOptions, timeout: float | None = None) -> NodeList:
        req = self._rest.get().resource(self.resource)
        for key, value in opts.to_params().items():
            req.param(key, value)
        return req.do(timeout).into(NodeList)

    def list_all(self, opts: ListNodesOptions | None = None, timeout: float | None = None) -> list[NodeListRow]:
        return list_all(
            lambda page_opts: self.list(page_opts, timeout),
            opts or ListNodesOptions(),
            self.list_policy,
        )

    def get(self, node_id: str, timeout: float | None = None) -> NodeGet:
        return self._rest.get().resource(self.resource).name(node_id).do(timeout).into(NodeGet)

    def validate_name(self, name: str, node_id: str = "", timeout: float | None = None) -> ValidationResult:
        """Check whether ``name`` can be used for a node; existing names are invalid."""
        req = self._rest.get().resource("node/name/check").param("name", name)
        if node_id:
            req.param("id", node_id)
        if req.do(timeout).into(bool):
            return ValidationResult(is_valid=False, message=f"node name '{name}' already exists")
        return ValidationResult(is_valid=True)
