#!/usr/bin/env python3
"""Declarative description of upstream operations.

An :class:`Endpoint` knows the HTTP method, the path template and how to map
the response. ``model`` may be a :class:`ForgeModel` (read from ``key``, or
the whole body), a :class:`ModelCollection` (read from ``key`` or the
collection's own key) or ``None`` for a raw request whose
:class:`ApiResponse` is handed back untouched.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple
from api.base_client import ApiRequest, ApiResponse
from api.exceptions import ForgeAPIError
from models.base import ForgeModel, ModelCollection, ModelError


@dataclass(frozen=True)
class Endpoint:
    method: str
    path: str
    model: Optional[type] = None
    key: Optional[str] = None
    context: Tuple[str, ...] = ()

    def request(self, body: Any = None, query: Optional[Dict[str, Any]] = None, **params) -> ApiRequest:
        if isinstance(body, (ForgeModel, ModelCollection)):
            body = body.to_wire()
        return ApiRequest(self.method, self.path.format(**params), body, query)

    def map(self, response: ApiResponse, **params) -> Any:
        if self.model is None:
            return response

        context = {name: params[name] for name in self.context if name in params}
        body = response.json()
        try:
            if issubclass(self.model, ModelCollection):
                return self.model.from_wire(body, context, key=self.key)
            data = response.json(self.key) if self.key else body
            if data is None:
                raise ForgeAPIError(f"Unexpected response from {self.path}: missing '{self.key}'",
                                    response.status_code)
            if not isinstance(data, dict):
                raise ForgeAPIError(f"Unexpected response from {self.path}: expected an object",
                                    response.status_code)
            return self.model.from_wire({**data, **context})
        except ModelError as e:
            raise ForgeAPIError(f"Unexpected response from {self.path}: {e}", response.status_code) from e


def raw(method: str, path: str) -> Endpoint:
    """An endpoint without response mapping."""
    return Endpoint(method, path)


def get(path: str, model: Optional[type] = None, key: Optional[str] = None, context: Tuple[str, ...] = ()) -> Endpoint:
    return Endpoint("GET", path, model, key, context)


def post(path: str, model: Optional[type] = None, key: Optional[str] = None, context: Tuple[str, ...] = ()) -> Endpoint:
    return Endpoint("POST", path, model, key, context)


def put(path: str, model: Optional[type] = None, key: Optional[str] = None, context: Tuple[str, ...] = ()) -> Endpoint:
    return Endpoint("PUT", path, model, key, context)


def delete(path: str) -> Endpoint:
    return Endpoint("DELETE", path)
