#!/usr/bin/env python3
"""Envelope formatting for tool results."""

import json
from typing import Any, Dict, Mapping, Optional
from models.base import ForgeModel, ModelCollection


def to_json(payload: Any) -> str:
    """Serialize a payload for a TextContent block."""
    return json.dumps(payload, indent=2, default=str)


def error_envelope(message: str) -> Dict[str, Any]:
    return {"success": False, "error": message}


def success_envelope(**fields) -> Dict[str, Any]:
    return {"success": True, **fields}


def render_result(result: Any, key: Optional[str] = None, message: Optional[str] = None,
                  ids: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Turn a façade return value into a success envelope.

    Collections become ``count`` plus the named list, entities are flattened,
    other values land under ``key`` and ``None`` becomes ``message`` plus the
    ids the operation targeted.
    """
    if isinstance(result, ModelCollection):
        return success_envelope(count=result.count, **{key or result.key: [item.to_dict() for item in result]})

    if isinstance(result, ForgeModel):
        envelope = success_envelope(**result.to_dict())
        if message:
            envelope["message"] = message
        return envelope

    if result is None:
        envelope = success_envelope(message=message or "Operation completed successfully.")
        envelope.update(ids or {})
        return envelope

    if isinstance(result, list):
        return success_envelope(count=len(result), **{key or "items": result})

    return success_envelope(**{key or "result": result})
