#!/usr/bin/env python3
"""Base tool class for MCP tools."""

from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional
from jsonschema import validators
from jsonschema.exceptions import best_match
from mcp.types import Tool, TextContent, ToolAnnotations
from config.logging_setup import get_logger
from utils.formatting import error_envelope, to_json

logger = get_logger(__name__)


class ToolValidationError(ValueError):
    """Arguments do not match the tool's input schema."""

    def __init__(self, tool_name: str, message: str, path: str = ""):
        self.tool_name = tool_name
        self.path = path
        location = f" at '{path}'" if path else ""
        super().__init__(f"Invalid arguments for {tool_name}{location}: {message}")


def normalize_integers(value: Any, schema: Dict[str, Any]) -> Any:
    """Turn integral floats (``1.0``) into ints wherever the schema asks for an integer."""
    kinds = schema.get("type")
    kinds = kinds if isinstance(kinds, list) else [kinds]
    if "integer" in kinds and isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict) and isinstance(schema.get("properties"), dict):
        properties = schema["properties"]
        return {key: normalize_integers(item, properties.get(key, {})) for key, item in value.items()}
    if isinstance(value, list) and isinstance(schema.get("items"), dict):
        return [normalize_integers(item, schema["items"]) for item in value]
    return value


class BaseTool(ABC):
    """Base class for MCP tools.

    ``run`` is the dispatch entry point: arguments are validated against
    ``get_schema()`` first (raising ToolValidationError) and only then handed
    to ``execute``. Subclasses return envelopes from ``execute`` and catch
    upstream failures there.
    """

    def __init__(self, name: str, description: str, read_only: bool = False,
                 idempotent: bool = False, destructive: bool = False, category: str = "general"):
        self.name = name
        self.category = category
        self.description = description
        self.read_only = read_only
        self.idempotent = idempotent
        self.destructive = destructive
        self._validator = None

    @abstractmethod
    def get_schema(self) -> Dict[str, Any]:
        """Get the JSON schema for this tool's input parameters."""
        pass

    @abstractmethod
    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        """Execute the tool with already validated arguments."""
        pass

    async def run(self, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
        arguments = dict(arguments or {})
        self.validate_arguments(arguments)
        return await self.execute(normalize_integers(arguments, self.get_schema()))

    def get_annotations(self) -> ToolAnnotations:
        return ToolAnnotations(
            readOnlyHint=self.read_only,
            idempotentHint=self.idempotent,
            destructiveHint=self.destructive,
            openWorldHint=True,
        )

    def to_mcp_tool(self) -> Tool:
        """Convert this tool to an MCP Tool object."""
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.get_schema(),
            annotations=self.get_annotations(),
        )

    def validate_arguments(self, arguments: Dict[str, Any]) -> None:
        """Validate the provided arguments against the schema."""
        if self._validator is None:
            schema = self.get_schema()
            validator_cls = validators.validator_for(schema)
            validator_cls.check_schema(schema)
            self._validator = validator_cls(schema)

        error = best_match(self._validator.iter_errors(arguments))
        if error is not None:
            raise ToolValidationError(self.name, error.message, "/".join(str(p) for p in error.path))

    def format_error(self, error: str) -> List[TextContent]:
        """Format a failure envelope as TextContent."""
        return self.format_result(error_envelope(error))

    def format_result(self, payload: Dict[str, Any]) -> List[TextContent]:
        return [TextContent(type="text", text=to_json(payload))]

    def handle_failure(self, error: Exception) -> List[TextContent]:
        """Render an upstream failure caught at the tool boundary."""
        logger.warning("Tool %s failed: %s", self.name, error)
        return self.format_error(str(error) or type(error).__name__)
