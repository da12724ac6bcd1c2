"""Wire models for the micro-service resource."""

from pydantic import Field

from .base import ListOptions, Page, WireModel

# loadBalance strategies
ROUND_ROBIN = "roundRobin"
MASTER_SLAVE = "masterSlave"


class ListMicroServicesOptions(ListOptions):
    # Fuzzy match on the micro-service name
    keyword: str = Field("", alias="name")
    # The API calls the image filter "projectId"
    image_id: int = Field(0, alias="projectId")
    node_id: str = ""
    label: str = ""


class MicroServiceListRow(WireModel):
    id: str = ""
    name: str = ""
    image_name: str = ""
    health_instance: int = 0
    instance: int = 0
    load_balance: str = ""


MicroServiceList = Page[MicroServiceListRow]


class LoadBalanceDetailSpec(WireModel):
    master: str
    # taskId of the backup instance
    task_id: str = Field(alias="id")


class MicroServiceGet(WireModel):
    bo_dynamic: bool = False
    id: str = ""
    name: str = ""
    image_name: str = ""
    health_instance: int = 0
    instance: int = 0
    load_balance: str = ""
    load_balance_detail: list[LoadBalanceDetailSpec] | None = None


class UpdateMicroServiceRequest(WireModel):
    id: str
    load_balance: str
    load_balance_detail: list[LoadBalanceDetailSpec] | None = None
