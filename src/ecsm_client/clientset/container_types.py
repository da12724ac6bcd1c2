"""Wire models for containers (service instances)."""

from pydantic import Field

from .base import ListOptions, Page, WireModel


class ListContainersOptions(ListOptions):
    name: str = ""
    service_id: str = ""
    node_id: str = ""


class ContainerInfo(WireModel):
    # Containers are addressed by their task id
    id: str = ""
    name: str = ""
    status: str = ""
    service_id: str = ""
    service_name: str = ""
    node_id: str = ""
    node_name: str = ""
    image: str = ""
    restart_count: int = 0
    created_time: str = ""


ContainerList = Page[ContainerInfo]


class ControlContainersRequest(WireModel):
    ids: list[str]


class ControlContainersResponse(WireModel):
    ids: list[str] = Field(default_factory=list)
