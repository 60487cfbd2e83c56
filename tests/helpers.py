"""Helpers shared by test modules."""

import json


def payload(result):
    """Decode the JSON envelope of a tool result."""
    assert len(result) == 1
    return json.loads(result[0].text)


def sample_arguments(schema, required_only=True):
    """Smallest argument mapping that satisfies a tool's input schema."""
    properties = schema.get("properties", {})
    names = schema.get("required", []) if required_only else list(properties)
    return {name: sample_value(properties[name]) for name in names}


def sample_value(schema):
    if "enum" in schema:
        return next(value for value in schema["enum"] if value is not None)
    kind = schema.get("type", "string")
    if isinstance(kind, list):
        kind = next(k for k in kind if k != "null")
    if kind == "integer":
        return max(schema.get("minimum", 1), 1)
    if kind == "boolean":
        return True
    if kind == "array":
        return [sample_value(schema.get("items", {"type": "string"}))] * max(schema.get("minItems", 1), 1)
    if kind == "object":
        return sample_arguments(schema)
    return "x" * max(schema.get("minLength", 1), 1)
