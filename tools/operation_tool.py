#!/usr/bin/env python3
"""Declarative single-call tools.

Every plain tool is one :class:`Operation` row: its parameters, which façade
method it calls, how arguments reach that method and how the result is
reported. :class:`OperationTool` interprets a row.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple
from mcp.types import TextContent
from models.base import UNSET
from tools.base_tool import BaseTool
from utils.formatting import render_result


@dataclass(frozen=True)
class Param:
    name: str
    type: str = "string"
    description: str = ""
    required: bool = False
    minimum: Optional[int] = None
    maximum: Optional[int] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    enum: Optional[Tuple[Any, ...]] = None
    items: Optional[Dict[str, Any]] = None
    min_items: Optional[int] = None
    nullable: bool = False
    default: Any = UNSET

    def schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": [self.type, "null"] if self.nullable else self.type}
        if self.description:
            schema["description"] = self.description
        constraints = (
            ("minimum", self.minimum), ("maximum", self.maximum),
            ("minLength", self.min_length), ("maxLength", self.max_length),
            ("items", self.items), ("minItems", self.min_items),
        )
        schema.update({key: value for key, value in constraints if value is not None})
        if self.enum is not None:
            schema["enum"] = list(self.enum) + ([None] if self.nullable else [])
        if self.default is not UNSET:
            schema["default"] = self.default
        return schema


def string(name: str, description: str = "", **kwargs) -> Param:
    return Param(name, "string", description, **kwargs)


def integer(name: str, description: str = "", **kwargs) -> Param:
    return Param(name, "integer", description, **kwargs)


def boolean(name: str, description: str = "", **kwargs) -> Param:
    return Param(name, "boolean", description, **kwargs)


def array(name: str, description: str = "", items: str = "string", **kwargs) -> Param:
    return Param(name, "array", description, items=kwargs.pop("item_schema", None) or {"type": items}, **kwargs)


def obj(name: str, description: str = "", **kwargs) -> Param:
    return Param(name, "object", description, **kwargs)


def identifier(name: str) -> Param:
    """Required positive id parameter, e.g. ``server_id``."""
    label = name[:-3].replace("_", " ") if name.endswith("_id") else name
    return integer(name, f"The {label} ID", required=True, minimum=1)


@dataclass(frozen=True)
class Operation:
    """One tool backed by exactly one façade call.

    ``call`` names the façade method as ``"<facade>.<method>"``. The façade
    receives the ``ids`` positionally, then a ``payload`` model built from the
    remaining arguments (when set), then ``args`` and ``fixed`` as keywords.
    """
    name: str
    description: str
    call: str
    ids: Tuple[str, ...] = ()
    params: Tuple[Param, ...] = ()
    payload: Optional[type] = None
    args: Tuple[str, ...] = ()
    fixed: Mapping[str, Any] = field(default_factory=dict)
    key: Optional[str] = None
    message: Optional[str] = None
    read_only: bool = False
    idempotent: bool = False
    destructive: bool = False

    @property
    def all_params(self) -> Tuple[Param, ...]:
        return tuple(identifier(name) for name in self.ids) + self.params


def read(name: str, call: str, description: str, **kwargs) -> Operation:
    return Operation(name, description, call, read_only=True, idempotent=True, **kwargs)


def write(name: str, call: str, description: str, **kwargs) -> Operation:
    return Operation(name, description, call, **kwargs)


def destroy(name: str, call: str, description: str, **kwargs) -> Operation:
    kwargs.setdefault("idempotent", True)
    return Operation(name, description, call, destructive=True, **kwargs)


class OperationTool(BaseTool):
    """Tool interpreting one Operation row against the Forge client."""

    def __init__(self, operation: Operation, api_client: Any, category: str = "general"):
        super().__init__(
            name=operation.name,
            description=operation.description,
            read_only=operation.read_only,
            idempotent=operation.idempotent,
            destructive=operation.destructive,
            category=category,
        )
        self.operation = operation
        self.api_client = api_client
        self._schema = None

    def get_schema(self) -> Dict[str, Any]:
        if self._schema is None:
            params = self.operation.all_params
            self._schema = {
                "type": "object",
                "properties": {param.name: param.schema() for param in params},
                "required": [param.name for param in params if param.required],
                "additionalProperties": False,
            }
        return self._schema

    def build_call(self, arguments: Dict[str, Any]) -> Tuple[List[Any], Dict[str, Any]]:
        """Map validated arguments onto the façade method's signature."""
        op = self.operation
        values = {p.name: p.default for p in op.all_params if p.default is not UNSET}
        values.update(arguments)

        positional = [values[name] for name in op.ids]
        if op.payload is not None:
            wire_keys = set(op.payload.wire_keys())
            positional.append(op.payload.from_wire({k: v for k, v in values.items() if k in wire_keys}))
        keywords = {name: values[name] for name in op.args if name in values}
        keywords.update(op.fixed)
        return positional, keywords

    def _facade_method(self):
        facade, method = self.operation.call.split(".", 1)
        return getattr(getattr(self.api_client, facade), method)

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        op = self.operation
        try:
            positional, keywords = self.build_call(arguments)
            result = await self._facade_method()(*positional, **keywords)
        except Exception as e:
            return self.handle_failure(e)

        message = op.message.format(**arguments) if op.message else None
        ids = {name: arguments[name] for name in op.ids}
        return self.format_result(render_result(result, op.key, message, ids))
