"""Client for provision templates and template directories.

Single-template operations live under ``provision-template``; batch
updates use ``provision-templates``. Tree, search, move and path-based
deletion work on path labels under ``provision-template/path-label``.
"""

from __future__ import annotations

from ..rest import RESTClient
from .common_types import PathRequest
from .template_types import (
    CreateDirectoryRequest,
    CreateDirectoryResponse,
    CreateTemplateRequest,
    CreateTemplateResponse,
    DeleteTemplateResult,
    DeleteTemplatesRequest,
    DeleteTemplatesResult,
    GetTemplateTreeOptions,
    MoveRequest,
    MoveResponse,
    ProvisionTemplateTree,
    SearchTemplateOptions,
    SearchTemplateResult,
    TemplateGet,
    UpdateTemplateBatchResult,
    UpdateTemplateRequest,
    UpdateTemplateResult,
    UpdateTemplatesBatchRequest,
)
from .validation import check_required_per_item

PATH_LABEL = "provision-template/path-label"


class TemplateClient:
    def __init__(self, rest_client: RESTClient):
        self._rest = rest_client

    def create_template(
        self,
        template: CreateTemplateRequest,
        timeout: float | None = None,
    ) -> CreateTemplateResponse:
        """Create one service template per image reference under ``template.path``."""
        return (
            self._rest.post()
            .resource(f"{PATH_LABEL}/service/batch")
            .body(template)
            .do(timeout)
            .into(CreateTemplateResponse)
        )

    def create_directory(
        self,
        directory: CreateDirectoryRequest,
        timeout: float | None = None,
    ) -> CreateDirectoryResponse:
        return (
            self._rest.post()
            .resource(f"{PATH_LABEL}/folder")
            .body(directory)
            .do(timeout)
            .into(CreateDirectoryResponse)
        )

    def move(self, move: MoveRequest, timeout: float | None = None) -> MoveResponse:
        """Move a template or directory from ``move.src`` to ``move.dst``."""
        return self._rest.put().resource(f"{PATH_LABEL}/move").body(move).do(timeout).into(MoveResponse)

    def update_template(
        self,
        template_id: str,
        req: UpdateTemplateRequest,
        timeout: float | None = None,
    ) -> UpdateTemplateResult:
        return (
            self._rest.put()
            .resource("provision-templates")
            .name(template_id)
            .body(req)
            .do(timeout)
            .into(UpdateTemplateResult)
        )

    def update_templates_by_id(
        self,
        req: UpdateTemplatesBatchRequest,
        timeout: float | None = None,
    ) -> list[UpdateTemplateBatchResult]:
        """Batch-update templates addressed by id.

        Raises:
            ValidationError: If an entry has no id.
        """
        check_required_per_item(req.templates, "id", "update_templates_by_id")
        return (
            self._rest.put()
            .resource("provision-templates")
            .body(req)
            .do(timeout)
            .into(list[UpdateTemplateBatchResult])
        )

    def update_templates_by_name(
        self,
        req: UpdateTemplatesBatchRequest,
        timeout: float | None = None,
    ) -> list[UpdateTemplateBatchResult]:
        """Batch-update templates addressed by name.

        Raises:
            ValidationError: If an entry has no name.
        """
        check_required_per_item(req.templates, "name", "update_templates_by_name")
        return (
            self._rest.put()
            .resource("provision-templates/images")
            .body(req)
            .do(timeout)
            .into(list[UpdateTemplateBatchResult])
        )

    def get_tree(self, opts: GetTemplateTreeOptions, timeout: float | None = None) -> ProvisionTemplateTree:
        """Return the template tree rooted at ``opts.path``."""
        req = self._rest.get().resource(f"{PATH_LABEL}/tree").param("path", opts.path)
        if opts.level > 0:
            req.param("level", opts.level)
        if opts.model:
            req.param("model", opts.model)
        return req.do(timeout).into(ProvisionTemplateTree)

    def get_by_id(self, template_id: str, timeout: float | None = None) -> TemplateGet:
        return (
            self._rest.get()
            .resource("provision-template")
            .name(template_id)
            .do(timeout)
            .into(TemplateGet)
        )

    def get_by_path(self, path: str, timeout: float | None = None) -> TemplateGet:
        return self._rest.get().resource(PATH_LABEL).param("path", path).do(timeout).into(TemplateGet)

    def search(self, opts: SearchTemplateOptions, timeout: float | None = None) -> SearchTemplateResult:
        """Search templates and directories by keyword, path and kind."""
        req = self._rest.get().resource(f"{PATH_LABEL}/search")
        if opts.key:
            req.param("key", opts.key)
        if opts.path:
            req.param("path", opts.path)
        if opts.kind:
            req.param("kind", opts.kind)
        return req.do(timeout).into(SearchTemplateResult)

    def delete_by_path(self, path: str, timeout: float | None = None) -> DeleteTemplateResult:
        return (
            self._rest.delete()
            .resource(PATH_LABEL)
            .body(PathRequest(path=path))
            .do(timeout)
            .into(DeleteTemplateResult)
        )

    def delete_by_id(self, template_id: str, timeout: float | None = None) -> DeleteTemplateResult:
        return (
            self._rest.delete()
            .resource(PATH_LABEL)
            .name(template_id)
            .do(timeout)
            .into(DeleteTemplateResult)
        )

    def delete_by_ids(self, template_ids: list[str], timeout: float | None = None) -> DeleteTemplatesResult:
        return (
            self._rest.delete()
            .resource(PATH_LABEL)
            .body(DeleteTemplatesRequest(ids=template_ids))
            .do(timeout)
            .into(DeleteTemplatesResult)
        )
