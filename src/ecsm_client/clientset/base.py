"""Base models shared by every resource family.

ECSM speaks camelCase JSON; models here use snake_case attributes and
translate on the wire through an alias generator. Fields whose wire name
does not follow the camelCase rule carry an explicit alias.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class WireModel(BaseModel):
    """Base for request and response payloads."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Page(WireModel, Generic[T]):
    """One page of a paginated listing.

    ``total`` counts all matching items across pages; ``items`` holds this
    page only. Listings that return a bare array have no ``total``.
    """

    total: int | None = None
    page_num: int = 0
    page_size: int = 0
    items: list[T] = Field(default_factory=list, alias="list")

    @field_validator("items", mode="before")
    @classmethod
    def _null_items(cls, value: Any) -> Any:
        # Some endpoints send "list": null for an empty result
        return [] if value is None else value


class ListOptions(WireModel):
    """Query options common to every paginated listing.

    Subclasses add their filters as fields whose alias is the query
    parameter name. Filters are sent only when set to a non-empty,
    non-zero value; ``pageNum`` and ``pageSize`` are always sent.
    """

    page_num: int = 1
    page_size: int = Field(0, ge=0)

    def to_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {"pageNum": self.page_num, "pageSize": self.page_size}
        for name, field in type(self).model_fields.items():
            if name in ("page_num", "page_size"):
                continue
            value = getattr(self, name)
            if value:
                params[field.alias or name] = value
        return params
