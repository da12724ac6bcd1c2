"""Wire models for deployment records."""

from pydantic import Field

from .base import ListOptions, Page, WireModel
from .common_types import EcsImageConfig, ImageInfo, ImageVSOA, NodeInfo, NodeSpec


class RecordGet(WireModel):
    """Full detail of one deployment of a service."""

    name: str = ""
    image: ImageInfo | None = None
    node: NodeInfo | None = None
    action: str = ""
    # "dynamic" or "static"
    policy: str = ""
    # Instance count under the dynamic policy
    factor: int | None = None
    cmd: list[str] = Field(default_factory=list)
    vsoa: ImageVSOA | None = None
    config: EcsImageConfig | None = None
    created_time: str = ""


class ListRecordOptions(ListOptions):
    # Records are listed per service; the API calls it "id"
    service_id: str = Field(alias="id")


class DeployRecord(WireModel):
    id: str = ""
    name: str = ""
    # Container start arguments
    cmd: str = ""
    created_time: str = ""
    image: str = ""
    node: NodeSpec | None = None


RecordList = Page[DeployRecord]
