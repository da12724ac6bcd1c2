"""Client for deployment records (``/service/record``).

Every deploy, update or rollback of a service leaves a record; records are
the targets of :meth:`ServiceClient.rollback`.
"""

from __future__ import annotations

from ..rest import RESTClient
from .pagination import TerminationPolicy, list_all
from .record_types import DeployRecord, ListRecordOptions, RecordGet, RecordList


class RecordClient:
    resource = "service/record"
    list_policy = TerminationPolicy.COUNT

    def __init__(self, rest_client: RESTClient):
        self._rest = rest_client

    def get(self, record_id: str, timeout: float | None = None) -> RecordGet:
        return self._rest.get().resource(self.resource).name(record_id).do(timeout).into(RecordGet)

    def delete(self, record_id: str, timeout: float | None = None) -> None:
        # The record id travels as a query parameter, not a path segment
        self._rest.delete().resource(self.resource).param("id", record_id).do(timeout).into(None)

    def list(self, opts: ListRecordOptions, timeout: float | None = None) -> RecordList:
        """Fetch one page of the records of service ``opts.service_id``."""
        req = self._rest.get().resource(self.resource)
        for key, value in opts.to_params().items():
            req.param(key, value)
        return req.do(timeout).into(RecordList)

    def list_all(self, opts: ListRecordOptions, timeout: float | None = None) -> list[DeployRecord]:
        return list_all(lambda page_opts: self.list(page_opts, timeout), opts, self.list_policy)
