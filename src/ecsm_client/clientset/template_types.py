"""Wire models for provision templates.

Templates live in a directory tree addressed by path labels such as
``/apps/edge/``. A tree node is either a ``folder`` or a ``service``
template.
"""

from __future__ import annotations

from pydantic import Field

from .base import WireModel
from .common_types import EcsImageConfig, ImageVSOA, NodeSpec

# --- Create ---


class CreateTemplateRequest(WireModel):
    image_refs: list[str]
    path: str


class CreateDirectoryRequest(WireModel):
    name: str
    path: str


class ProvisionTemplateRow(WireModel):
    id: str = ""
    name: str = ""


class CreateTemplateResponse(WireModel):
    provision_tmpl_list: list[ProvisionTemplateRow] = Field(default_factory=list)


class CreateDirectoryResponse(WireModel):
    id: str = ""
    path: str = ""


# --- Move ---


class MoveRequest(WireModel):
    src: str
    dst: str


class MoveResponse(WireModel):
    id: str = ""


# --- Update ---


class ImageForTemplate(WireModel):
    ref: str
    config: EcsImageConfig | None = None
    vsoa: ImageVSOA | None = None
    pull_policy: str | None = None


class TemplateSpec(WireModel):
    image: ImageForTemplate | None = None
    node: NodeSpec | None = None
    factor: int | None = None
    # "dynamic" or "static"
    policy: str | None = None
    prepull: bool | None = None


class UpdateTemplateRequest(WireModel):
    name: str | None = None
    templates: TemplateSpec | None = None
    # Deployment action applied after the update: "run" or "load"
    action: str | None = None


class DeployTask(WireModel):
    task_id: str = Field("", alias="id")


class DeployResult(WireModel):
    """Outcome of the deployment triggered by a template update."""

    # Field name as spelled by the API
    provision_tmpl_id: str = Field("", alias="provisionTmpld")
    # "failed", "created" or "updated"
    result: str = ""
    provision_id: str | None = None
    tasks: list[DeployTask] = Field(default_factory=list)
    error: str | None = None


class UpdateTemplateResult(WireModel):
    id: str = ""
    deploy_result: DeployResult | None = None


class TemplateUpdateBatchSpec(WireModel):
    """One entry of a batch update, addressed by ``id`` or by ``name``."""

    name: str | None = None
    id: str | None = None
    # New image reference, "name@tag#os"
    image_ref: str
    # Overrides the batch-wide action for this entry
    action: str | None = None


class UpdateTemplatesBatchRequest(WireModel):
    templates: list[TemplateUpdateBatchSpec]
    action: str | None = None


class UpdateTemplateBatchResult(WireModel):
    id: str = ""
    name: str = ""
    result: bool = False
    message: str = ""
    deploy_result: DeployResult | None = None


# --- Get ---


class GetTemplateTreeOptions(WireModel):
    path: str
    level: int = 0
    # "simple" or "full"
    model: str = ""


class ProvisionTemplateDetail(WireModel):
    id: str = ""
    name: str = ""
    # "folder" or "service"
    kind: str = ""
    hostname: str = ""
    node: NodeSpec | None = None
    created_time: str = ""
    updated_time: str = ""


class ProvisionTemplateTree(WireModel):
    name: str = ""
    real_path: str = Field("", alias="realpath")
    child_count: int = 0
    # Only filled in with model="full"
    data: ProvisionTemplateDetail | None = None
    children: dict[str, ProvisionTemplateTree] | None = None


class TemplateGet(WireModel):
    id: str = ""
    name: str = ""
    kind: str = ""
    spec: TemplateSpec | None = None
    created_time: str = ""
    updated_time: str = ""


class SearchTemplateOptions(WireModel):
    key: str = ""
    path: str = ""
    kind: str = ""


class SearchTemplateResult(WireModel):
    id: str = ""
    name: str = ""
    kind: str = ""
    hostname: str = ""
    real_path: str = Field("", alias="realpath")
    node: NodeSpec | None = None
    created_time: str = ""
    updated_time: str = ""


# --- Delete ---


class DeleteTemplateResult(WireModel):
    id: str = ""


class DeleteTemplatesRequest(WireModel):
    ids: list[str] = Field(alias="id")


class DeleteTemplatesResult(WireModel):
    ids: list[str] = Field(default_factory=list, alias="id")
