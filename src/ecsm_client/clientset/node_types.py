"""Wire models for nodes (hosts running containers)."""

from .base import ListOptions, Page, WireModel


class ListNodesOptions(ListOptions):
    name: str = ""
    # "online" or "offline"
    status: str = ""


class NodeListRow(WireModel):
    id: str = ""
    name: str = ""
    address: str = ""
    status: str = ""
    arch: str = ""
    container_count: int = 0
    created_time: str = ""


NodeList = Page[NodeListRow]


class NodeGet(WireModel):
    id: str = ""
    name: str = ""
    address: str = ""
    status: str = ""
    arch: str = ""
    platform: str = ""
    cpu_count: int = 0
    memory_total: int = 0
    disk_total: int = 0
    container_count: int = 0
    created_time: str = ""
    updated_time: str = ""
