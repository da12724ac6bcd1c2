"""Wire models for the service resource."""

from pydantic import Field

from .base import ListOptions, Page, WireModel
from .common_types import EcsImageConfig, ImageInfo, ImageVSOA, NodeSpec


class ImageSpec(WireModel):
    """Image a service is deployed from.

    ``ref`` has the form ``name@tag#os``; ``action`` is ``run`` or ``load``.
    """

    ref: str
    action: str | None = None
    config: EcsImageConfig | None = None
    vsoa: ImageVSOA | None = None
    pull_policy: str | None = None
    auto_upgrade: str | None = None


class CreateServiceRequest(WireModel):
    name: str
    image: ImageSpec
    node: NodeSpec
    factor: int | None = None
    # "static" or "dynamic"
    policy: str | None = None
    prepull: bool | None = None


class UpdateServiceRequest(CreateServiceRequest):
    id: str


class ServiceCreateResponse(WireModel):
    id: str = ""
    name: str = ""


class ServiceDeleteResponse(WireModel):
    id: str = ""
    transaction_id: str = ""


class ProvisionListRow(WireModel):
    id: str = ""
    name: str = ""
    status: str = ""
    policy: str = ""
    factor: int = 0
    health_instance: int = 0
    instance: int = 0
    created_time: str = ""
    updated_time: str = ""


ServiceList = Page[ProvisionListRow]


class ServiceGet(WireModel):
    id: str = ""
    name: str = ""
    status: str = ""
    policy: str = ""
    factor: int = 0
    prepull: bool = False
    image: ImageInfo | None = None
    node: NodeSpec | None = None
    created_time: str = ""
    updated_time: str = ""


class ListServicesOptions(ListOptions):
    name: str = ""
    # The API calls the image filter "id"
    image_id: str = Field("", alias="id")
    node_id: str = ""
    label: str = ""


class CreateByPathOptions(WireModel):
    paths: list[str]
    force: bool | None = None
    # "run" or "load"; also selects the endpoint
    action: str = "run"


class DeleteByPathResult(WireModel):
    id: str = ""
    result: str = ""
    transaction_id: str = ""


class ControlServicesRequest(WireModel):
    ids: list[str]


class ControlServicesResponse(WireModel):
    ids: list[str] = Field(default_factory=list)


class RedeployRequest(WireModel):
    id: str


class ValidateNameOptions(WireModel):
    name: str
    id: str = ""


class RollBackRequest(WireModel):
    id: str
    record_id: str


class Transaction(WireModel):
    id: str = ""
    status: str = ""
    created_time: str = ""


class ServiceStatistics(WireModel):
    total: int = 0
    health: int = 0
    running: int = 0
    stopped: int = 0
