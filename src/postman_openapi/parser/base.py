"""Data models for Postman collections.

The loader validates the raw collection document into these models. Nodes of
the collection tree form a discriminated union: a folder (``ItemGroup``), a
request (``Item``), or anything else (``UnknownNode``), which the converter
skips.
"""

import logging
from typing import Annotated, Any, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    ValidationError,
    ValidatorFunctionWrapHandler,
    WrapValidator,
    model_validator,
)

logger = logging.getLogger(__name__)


def _none_as_empty(value: Any) -> Any:
    return [] if value is None else value


# Postman exports sometimes carry `null` where a list is expected.
_EmptyIfNone = BeforeValidator(_none_as_empty)


class PostmanModel(BaseModel):
    """Base for all collection models. Unknown Postman fields are kept."""

    model_config = ConfigDict(extra="allow")


class KeyValue(PostmanModel):
    """A query entry, header, URL variable, or form field."""

    key: str | None = None
    value: Any = None
    description: str | dict | None = None
    type: str | None = None
    disabled: bool | None = False

    @property
    def description_text(self) -> str:
        if isinstance(self.description, dict):
            return self.description.get("content") or ""
        return self.description or ""


class Url(PostmanModel):
    raw: str | None = None
    protocol: str | None = None
    host: list[Any] | str | None = None
    path: list[Any] | str | None = None
    port: str | int | None = None
    query: Annotated[list[KeyValue], _EmptyIfNone] = []
    variable: Annotated[list[KeyValue], _EmptyIfNone] = []

    def to_string(self) -> str:
        """The raw URL, rebuilt from host and path when ``raw`` is missing."""
        if self.raw:
            return self.raw
        host = self.host if isinstance(self.host, str) else ".".join(str(h) for h in self.host or [])
        if isinstance(self.path, str):
            path = self.path.lstrip("/")
        else:
            path = "/".join(
                str(p.get("value", "")) if isinstance(p, dict) else str(p) for p in self.path or []
            )
        url = f"{host}/{path}" if path else host
        if self.protocol and host:
            url = f"{self.protocol}://{url}"
        return url


class Description(PostmanModel):
    content: str | None = None
    type: str | None = None


class Auth(PostmanModel):
    """An auth declaration. Its attributes live under a key named after ``type``."""

    type: str | None = None

    def attributes(self) -> dict[str, Any]:
        """Return the attributes for this auth type as a flat ``key -> value`` dict.

        Collection v2.1 stores them as a list of ``{key, value}`` entries,
        v2.0 as a plain mapping.
        """
        raw = (self.model_extra or {}).get(self.type)
        if isinstance(raw, dict):
            return dict(raw)
        if isinstance(raw, list):
            return {
                entry["key"]: entry.get("value")
                for entry in raw
                if isinstance(entry, dict) and "key" in entry
            }
        return {}


class Body(PostmanModel):
    mode: str | None = None
    raw: str | None = None
    urlencoded: Annotated[list[KeyValue], _EmptyIfNone] = []
    formdata: Annotated[list[KeyValue], _EmptyIfNone] = []
    graphql: dict | None = None
    options: dict | None = None
    disabled: bool | None = False


class Request(PostmanModel):
    method: str | None = None
    url: str | Url | None = None
    description: str | Description | None = None
    header: Annotated[list[KeyValue] | str, _EmptyIfNone] = []
    auth: Auth | None = None
    body: Body | None = None

    @property
    def raw_url(self) -> str:
        if isinstance(self.url, str):
            return self.url
        if self.url is not None:
            return self.url.to_string()
        return ""

    @property
    def description_text(self) -> str:
        if isinstance(self.description, Description):
            return self.description.content or ""
        return self.description or ""


class SampleResponse(PostmanModel):
    """A saved example response attached to an item."""

    name: str | None = None
    code: int | None = None
    status: str | None = None
    body: Any = None


class Script(PostmanModel):
    exec: list[str] | str | None = None


class Event(PostmanModel):
    listen: str | None = None
    script: Script | None = None


class Item(PostmanModel):
    """A single request in the collection."""

    name: str | None = None
    request: str | Request
    response: Annotated[list[SampleResponse], _EmptyIfNone] = []
    event: Annotated[list[Event], _EmptyIfNone] = []


class UnknownNode(PostmanModel):
    """A node that is neither a folder nor a request."""

    raw: Any = None

    @model_validator(mode="before")
    @classmethod
    def _wrap_non_mapping(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return data
        return {"raw": data}


def _node_kind(value: Any) -> str:
    if isinstance(value, BaseModel):
        return {ItemGroup: "group", Item: "item"}.get(type(value), "unknown")
    if isinstance(value, dict):
        if isinstance(value.get("item"), list):
            return "group"
        if isinstance(value.get("request"), (str, dict)):
            return "item"
    return "unknown"


def _skip_invalid_node(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    try:
        return handler(value)
    except ValidationError as exc:
        name = value.get("name") if isinstance(value, dict) else None
        logger.warning("Skipping malformed node %r: %d validation error(s)", name, exc.error_count())
        return UnknownNode(raw=value)


# A node that fails validation is kept as an UnknownNode, so its siblings still convert.
CollectionNode = Annotated[
    Union[
        Annotated["ItemGroup", Tag("group")],
        Annotated[Item, Tag("item")],
        Annotated[UnknownNode, Tag("unknown")],
    ],
    Discriminator(_node_kind),
    WrapValidator(_skip_invalid_node),
]


class ItemGroup(PostmanModel):
    """A folder of requests and nested folders."""

    name: str | None = None
    description: str | Description | None = None
    item: Annotated[list[CollectionNode], _EmptyIfNone] = []


class CollectionInfo(PostmanModel):
    name: str | None = None
    description: str | Description | None = None
    schema_url: str | None = Field(default=None, alias="schema")
    postman_id: str | None = Field(default=None, alias="_postman_id")

    @property
    def description_text(self) -> str:
        if isinstance(self.description, Description):
            return self.description.content or ""
        return self.description or ""


class Collection(PostmanModel):
    """A whole Postman collection document."""

    info: CollectionInfo = Field(default_factory=CollectionInfo)
    item: Annotated[list[CollectionNode], _EmptyIfNone] = []
    auth: Auth | None = None
    variable: Annotated[list[KeyValue], _EmptyIfNone] = []
    event: Annotated[list[Event], _EmptyIfNone] = []

    def variable_value(self, key: str) -> str | None:
        for var in self.variable:
            if var.key == key and var.value not in (None, ""):
                return str(var.value)
        return None

    def as_group(self) -> ItemGroup:
        """The collection root as a nameless folder, so it adds no tag."""
        return ItemGroup(item=self.item)


ItemGroup.model_rebuild()
Collection.model_rebuild()
