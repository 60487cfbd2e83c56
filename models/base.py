#!/usr/bin/env python3
"""Base model classes: generic wire mapping for every Forge data object.

Data objects are frozen dataclasses. Each dataclass field maps to one key of
the snake_case wire format; the key is the field name with a trailing
underscore removed (``from_`` -> ``from``) unless the field metadata names
it explicitly via :func:`wire`.
"""

import dataclasses
import typing
from functools import lru_cache
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Type, TypeVar, Union


class ModelError(ValueError):
    """Raised when a payload cannot be mapped onto a model."""


class _Unset:
    """Marker for a field the caller did not provide."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Unset, ())


UNSET: Any = _Unset()

M = TypeVar("M", bound="ForgeModel")


def wire(name: str, **kwargs) -> Any:
    """Declare a field whose wire key differs from its attribute name."""
    metadata = dict(kwargs.pop("metadata", {}) or {})
    metadata["wire"] = name
    return dataclasses.field(metadata=metadata, **kwargs)


def wire_name(field: dataclasses.Field) -> str:
    return field.metadata.get("wire") or field.name.rstrip("_")


def _is_required(field: dataclasses.Field) -> bool:
    return field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING


@lru_cache(maxsize=None)
def _field_table(cls: type) -> Tuple[Tuple[dataclasses.Field, str, Any], ...]:
    hints = typing.get_type_hints(cls)
    return tuple((f, wire_name(f), hints.get(f.name, Any)) for f in dataclasses.fields(cls))


def _strip_optional(hint: Any) -> Tuple[Any, ...]:
    if typing.get_origin(hint) is Union:
        return tuple(arg for arg in typing.get_args(hint) if arg is not type(None))
    return (hint,)


def _coerce(value: Any, hint: Any, owner: str, key: str) -> Any:
    if value is None or value is UNSET or hint is Any:
        return value
    candidates = _strip_optional(hint)
    if len(candidates) > 1:
        # Union of concrete types: keep the value when it already matches one
        for candidate in candidates:
            if isinstance(candidate, type) and isinstance(value, candidate):
                return value
        return _coerce(value, candidates[0], owner, key)
    target = candidates[0]
    origin = typing.get_origin(target) or target

    try:
        if target is bool:
            if isinstance(value, str):
                return value.strip().lower() in ("1", "true", "yes", "on")
            return bool(value)
        if target is int and not isinstance(value, bool):
            if isinstance(value, float) and not value.is_integer():
                raise ValueError("not integral")
            return value if isinstance(value, int) else int(value)
        if target is float:
            return float(value)
        if target is str:
            if isinstance(value, (Mapping, list, tuple)):
                raise TypeError("not a scalar")
            return value if isinstance(value, str) else str(value)
    except (TypeError, ValueError) as e:
        raise ModelError(f"{owner}.{key}: cannot convert {value!r} to {target.__name__}") from e

    if origin in (list, List, tuple) and not isinstance(value, (list, tuple)):
        raise ModelError(f"{owner}.{key}: expected a list, got {type(value).__name__}")
    if origin in (dict, Dict) and not isinstance(value, Mapping):
        raise ModelError(f"{owner}.{key}: expected an object, got {type(value).__name__}")
    if origin in (list, List) and isinstance(value, tuple):
        return list(value)
    return value


@dataclasses.dataclass(frozen=True)
class ForgeModel:
    """Base class for all Forge data objects."""

    @classmethod
    def from_wire(cls: Type[M], data: Mapping[str, Any]) -> M:
        """Build the model from a snake_case mapping; unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise ModelError(f"{cls.__name__} expects an object, got {type(data).__name__}")

        kwargs = {}
        for field, key, hint in _field_table(cls):
            if key in data:
                value = data[key]
                if value is None and _is_required(field):
                    raise ModelError(f"{cls.__name__} field '{key}' must not be null")
                kwargs[field.name] = _coerce(value, hint, cls.__name__, key)
            elif _is_required(field):
                raise ModelError(f"{cls.__name__} payload is missing required field '{key}'")
        return cls(**kwargs)

    def to_wire(self) -> Dict[str, Any]:
        """Serialize back to snake_case keys, leaving out unset fields."""
        result = {}
        for field, key, _ in _field_table(type(self)):
            value = getattr(self, field.name)
            if value is UNSET:
                continue
            result[key] = _plain(value)
        return result

    def to_dict(self) -> Dict[str, Any]:
        return self.to_wire()

    @classmethod
    def wire_keys(cls) -> List[str]:
        return [key for _, key, _ in _field_table(cls)]


def _plain(value: Any) -> Any:
    if isinstance(value, (ForgeModel, ModelCollection)):
        return value.to_wire()
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


@dataclasses.dataclass(frozen=True)
class ModelCollection:
    """Named, ordered container of one model type.

    Subclasses set ``item_model`` and ``key``; ``key`` is the wire key that
    holds the list and the attribute name the items are exposed under.
    """

    items: Tuple[Any, ...] = ()

    item_model = ForgeModel
    key = "items"

    @classmethod
    def from_wire(cls, data: Any, context: Optional[Mapping[str, Any]] = None,
                  key: Optional[str] = None):
        """Build from a response body (or a bare list) merging ``context`` into every item."""
        if isinstance(data, Mapping):
            if (key or cls.key) not in data:
                raise ModelError(f"{cls.__name__} expects a '{key or cls.key}' key, got {sorted(data)}")
            rows = data[key or cls.key]
        else:
            rows = data
        if rows is None:
            rows = []
        if not isinstance(rows, (list, tuple)):
            raise ModelError(f"{cls.__name__} expects a list under '{key or cls.key}'")
        extra = dict(context or {})
        items = []
        for row in rows:
            if not isinstance(row, Mapping):
                raise ModelError(f"{cls.__name__} item must be an object, got {type(row).__name__}")
            items.append(cls.item_model.from_wire({**row, **extra}))
        return cls(tuple(items))

    @property
    def count(self) -> int:
        return len(self.items)

    def __getattr__(self, name: str):
        if name == type(self).key:
            return self.items
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def to_wire(self) -> Dict[str, Any]:
        return {type(self).key: [item.to_wire() for item in self.items]}

    def to_dict(self) -> Dict[str, Any]:
        return {"count": self.count, **self.to_wire()}
