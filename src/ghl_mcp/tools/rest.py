"""Declarative REST operations and the tool group built from them.

Every GHL tool is a single call against the REST API, so each group is a
table of ``Operation`` entries instead of a hand-written method per tool.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Literal
from urllib.parse import quote

from ghl_mcp.clients.ghl import GHLApiClient
from ghl_mcp.exceptions import ToolArgumentError, UnknownToolError
from ghl_mcp.tools.base import ToolDescriptor

logger = logging.getLogger(__name__)

ParamLocation = Literal["path", "query", "body"]

_BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


@dataclass(frozen=True)
class Param:
    """One named argument of an operation.

    Attributes:
        name: Argument name, also the wire name in the GHL API.
        location: Where the value is sent: path template, query, or body.
        type: JSON Schema type of the value.
        description: Text shown to MCP clients.
        required: Whether the call is rejected when the value is missing.
        location_default: Fall back to the configured location ID.
        default: Value sent when the caller omits the argument.
        enum: Allowed values, if constrained.
        items: JSON Schema for array items.
    """

    name: str
    location: ParamLocation = "body"
    type: str = "string"
    description: str = ""
    required: bool = False
    location_default: bool = False
    default: Any = None
    enum: tuple[str, ...] | None = None
    items: dict[str, Any] | None = None

    def schema(self) -> dict[str, Any]:
        prop: dict[str, Any] = {"type": self.type}
        if self.description:
            prop["description"] = self.description
        if self.enum:
            prop["enum"] = list(self.enum)
        if self.type == "array":
            prop["items"] = self.items or {"type": "string"}
        if self.default is not None:
            prop["default"] = self.default
        return prop


def path(name: str, description: str = "", **kwargs: Any) -> Param:
    """Path parameter; always required."""
    return Param(name, "path", description=description, required=True, **kwargs)


def query(name: str, description: str = "", **kwargs: Any) -> Param:
    return Param(name, "query", description=description, **kwargs)


def body(name: str, description: str = "", **kwargs: Any) -> Param:
    return Param(name, "body", description=description, **kwargs)


_LOCATION_DESCRIPTION = "Location ID (defaults to the configured location)"


def location(where: ParamLocation = "query", name: str = "locationId") -> Param:
    """Location ID argument that falls back to the configured location."""
    return Param(name, where, description=_LOCATION_DESCRIPTION, location_default=True)


def alt(where: ParamLocation = "query") -> tuple[Param, Param]:
    """``altId``/``altType`` pair used by the commerce and invoicing APIs."""
    return (
        Param("altId", where, description=_LOCATION_DESCRIPTION, location_default=True),
        Param("altType", where, description="Owner type", default="location", enum=("location",)),
    )


@dataclass(frozen=True)
class Operation:
    """A single tool backed by one GHL API request."""

    name: str
    description: str
    method: str
    path: str
    params: tuple[Param, ...] = field(default_factory=tuple)

    def descriptor(self) -> ToolDescriptor:
        properties = {p.name: p.schema() for p in self.params}
        required = [p.name for p in self.params if p.required]
        schema: dict[str, Any] = {"type": "object", "properties": properties}
        if required:
            schema["required"] = required
        return ToolDescriptor(self.name, self.description, schema)


def op(
    name: str,
    description: str,
    method: str,
    path_template: str,
    *params: Param,
) -> Operation:
    return Operation(name, description, method.upper(), path_template, tuple(params))


@dataclass
class PreparedRequest:
    """Arguments split into the parts of an HTTP request."""

    method: str
    path: str
    params: dict[str, Any] = field(default_factory=dict)
    json_body: dict[str, Any] | None = None


def _is_blank(value: Any) -> bool:
    return isinstance(value, str) and not value.strip()


def prepare_request(
    operation: Operation,
    arguments: dict[str, Any],
    location_id: str = "",
) -> PreparedRequest:
    """Map tool arguments onto the operation's path, query and body.

    Arguments the operation does not declare are forwarded in the body for
    write methods and in the query string otherwise. ``None`` values are
    dropped, and a blank string counts as missing for path and required
    arguments so an empty ID never resolves to a different endpoint.

    Raises:
        ToolArgumentError: If a required argument is missing.
    """
    values = {k: v for k, v in arguments.items() if v is not None}

    path_values: dict[str, str] = {}
    query_values: dict[str, Any] = {}
    body_values: dict[str, Any] = {}
    declared = set()

    for param in operation.params:
        declared.add(param.name)
        value = values.get(param.name)
        if _is_blank(value) and (param.required or param.location == "path"):
            value = None
        if value is None and param.location_default and location_id:
            value = location_id
        if value is None:
            value = param.default
        if value is None:
            if param.required or param.location == "path":
                raise ToolArgumentError(
                    operation.name, f"missing required argument '{param.name}'"
                )
            continue
        if param.location == "path":
            path_values[param.name] = quote(str(value), safe="")
        elif param.location == "query":
            query_values[param.name] = value
        else:
            body_values[param.name] = value

    extras = {k: v for k, v in values.items() if k not in declared}
    if operation.method in _BODY_METHODS:
        body_values.update(extras)
    else:
        query_values.update(extras)

    try:
        resolved_path = operation.path.format(**path_values)
    except KeyError as e:
        raise ToolArgumentError(
            operation.name, f"missing required argument {e}"
        ) from e

    has_body = operation.method in _BODY_METHODS or bool(body_values)
    return PreparedRequest(
        method=operation.method,
        path=resolved_path,
        params=query_values,
        json_body=body_values if has_body else None,
    )


class RestToolGroup:
    """Tool group whose tools are declared as a table of ``Operation``s.

    Subclasses set ``group_id`` and ``operations``.
    """

    group_id: str = ""
    operations: tuple[Operation, ...] = ()

    def __init__(self, client: GHLApiClient) -> None:
        self._client = client
        self._by_name: dict[str, Operation] = {o.name: o for o in self.operations}
        self._descriptors = [o.descriptor() for o in self.operations]

    def list_descriptors(self) -> list[ToolDescriptor]:
        return list(self._descriptors)

    def handles(self, name: str) -> bool:
        return name in self._by_name

    async def execute(self, name: str, arguments: dict[str, Any]) -> Any:
        operation = self._by_name.get(name)
        if operation is None:
            raise UnknownToolError(name)

        request = prepare_request(operation, arguments, self._client.location_id)
        logger.debug(f"[{self.group_id}] {name} -> {request.method} {request.path}")
        return await self._client.request(
            request.method,
            request.path,
            params=request.params,
            json_body=request.json_body,
        )

    def __len__(self) -> int:
        return len(self.operations)
