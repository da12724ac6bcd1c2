"""Wire models shared by several resource families.

The image configuration tree describes a SylixOS container: process
settings plus resource, network and command limits. Services, records and
templates all embed it.
"""

from pydantic import ConfigDict, Field

from .base import WireModel


class NodeSpec(WireModel):
    """Placement of a service onto named nodes."""

    names: list[str] = Field(default_factory=list)


class NodeInfo(WireModel):
    id: str = ""
    name: str = ""


class ImageInfo(WireModel):
    ref: str = ""
    path: str = ""
    pull_policy: str = ""
    auto_upgrade: str = ""


class ImageVSOA(WireModel):
    """VSOA service description attached to an image.

    Its layout is defined by the image, so unknown keys are preserved.
    """

    model_config = ConfigDict(extra="allow")


class Process(WireModel):
    args: list[str] = Field(default_factory=list)
    env: list[str] = Field(default_factory=list)
    cwd: str = "/"


class CPU(WireModel):
    highest_prio: int = 0
    lowest_prio: int = 0


class Memory(WireModel):
    kheap_limit: int = 0
    memory_limit_mb: int = Field(0, alias="memoryLimitMB")


class Disk(WireModel):
    limit_mb: int = Field(0, alias="limitMB")


class KernelObject(WireModel):
    thread_limit: int = 0
    thread_pool_limit: int = 0
    event_limit: int = 0
    event_set_limit: int = 0
    partition_limit: int = 0
    region_limit: int = 0
    msg_queue_limit: int = 0
    timer_limit: int = 0


class Resources(WireModel):
    cpu: CPU | None = None
    memory: Memory | None = None
    disk: Disk | None = None
    kernel_object: KernelObject | None = None


class Network(WireModel):
    ftpd_enable: bool = False
    telnetd_enable: bool = False


class SylixOS(WireModel):
    resources: Resources | None = None
    network: Network | None = None
    commands: list[str] = Field(default_factory=list)


class EcsImageConfig(WireModel):
    process: Process | None = None
    sylixos: SylixOS | None = None


class ValidationResult(WireModel):
    """Answer to a name-availability check."""

    is_valid: bool
    message: str = ""


class PathRequest(WireModel):
    """Body of the operations addressed by a template path label."""

    path: str
