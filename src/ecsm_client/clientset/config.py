"""Client for config items (``/configmap``).

Create and update both check the value against its declared type before
sending; the server would otherwise store a value its consumers cannot
read back as announced.
"""

from __future__ import annotations

from typing import Any

from ..errors import ValidationError
from ..rest import RESTClient
from .base import Page
from .config_types import ConfigItem, CreateConfigRequest, ListConfigsOptions
from .pagination import TerminationPolicy, list_all
from .validation import check_typed_value


class ConfigClient:
    resource = "configmap"
    # The listing returns a bare array without a total
    list_policy = TerminationPolicy.SHORT_PAGE

    def __init__(self, rest_client: RESTClient):
        self._rest = rest_client

    def create(self, config: CreateConfigRequest, timeout: float | None = None) -> None:
        """Create a config item.

        Raises:
            ValidationError: If ``config.value`` does not match ``config.type``.
        """
        check_typed_value(config.type, config.value)
        self._rest.post().resource(self.resource).body(config).do(timeout).into(None)

    def update(self, config: ConfigItem, timeout: float | None = None) -> None:
        """Update the config item ``config.id``.

        Raises:
            ValidationError: If the id is missing or ``config.value`` does
                not match ``config.type``.
        """
        if not config.id:
            msg = "config ID is required for update"
            raise ValidationError(msg)
        check_typed_value(config.type, config.value)
        self._rest.put().resource(self.resource).body(config).do(timeout).into(None)

    def delete(self, config_id: str, timeout: float | None = None) -> None:
        self._rest.delete().resource(self.resource).name(config_id).do(timeout).into(None)

    def get(self, key: str, timeout: float | None = None) -> Any:
        """Return the stored value for ``key`` as decoded JSON."""
        return self._rest.get().resource("configmap/key").param("key", key).do(timeout).into(Any)

    def list(self, opts: ListConfigsOptions, timeout: float | None = None) -> Page[ConfigItem]:
        """Fetch one page of config items.

        The endpoint returns a bare array, so the page has no ``total``.
        """
        req = self._rest.get().resource(self.resource)
        for key, value in opts.to_params().items():
            req.param(key, value)
        items = req.do(timeout).into(list[ConfigItem] | None)
        return Page[ConfigItem](
            items=items or [],
            page_num=opts.page_num,
            page_size=opts.page_size,
        )

    def list_all(self, opts: ListConfigsOptions | None = None, timeout: float | None = None) -> list[ConfigItem]:
        return list_all(
            lambda page_opts: self.list(page_opts, timeout),
            opts or ListConfigsOptions(),
            self.list_policy,
        )
