"""Typed resource clients for the ECSM API.

Exports:
    Clientset: Entry point holding one client per resource family.
    new_clientset: Build a Clientset from protocol, host and port.
    list_all / TerminationPolicy: Exhaustive pagination helpers.
    Resource clients and their wire models, re-exported per family.
"""

from . import (
    common_types,
    config_types,
    container_types,
    micro_service_types,
    node_types,
    record_types,
    service_types,
    template_types,
)
from .base import ListOptions, Page, WireModel
from .clientset import Clientset, new_clientset
from .config import ConfigClient
from .container import ContainerClient
from .micro_service import MicroServiceClient
from .node import NodeClient
from .pagination import DEFAULT_PAGE_SIZE, TerminationPolicy, iter_pages, list_all
from .record import RecordClient
from .service import ServiceClient
from .template import TemplateClient
from .validation import ConfigItemType, check_typed_value, decode_typed_value

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "Clientset",
    "ConfigClient",
    "ConfigItemType",
    "ContainerClient",
    "ListOptions",
    "MicroServiceClient",
    "NodeClient",
    "Page",
    "RecordClient",
    "ServiceClient",
    "TemplateClient",
    "TerminationPolicy",
    "WireModel",
    "check_typed_value",
    "common_types",
    "config_types",
    "container_types",
    "decode_typed_value",
    "iter_pages",
    "list_all",
    "micro_service_types",
    "new_clientset",
    "node_types",
    "record_types",
    "service_types",
    "template_types",
]
