"""Data contracts shared by every endpoint wrapper.

Response types are plain dataclasses whose fields map onto JSON keys through
``json_field`` metadata. Parameter types are dataclasses whose fields default
to ``None`` and map onto query-string names through ``query_field`` metadata.

``decode`` turns parsed JSON into a result type and raises ``DecodeError``
with the JSON path of the first value that does not fit. ``encode_params``
flattens a parameter dataclass into the mapping the request executor sends.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import MISSING, field, fields, is_dataclass
from datetime import date, datetime
from functools import lru_cache
from types import UnionType
from typing import Any, TypeVar, Union, get_args, get_origin, get_type_hints

from .errors import DecodeError

T = TypeVar("T")

_NONE_TYPE = type(None)

_ZERO_VALUES: dict[Any, Any] = {str: "", int: 0, float: 0.0, bool: False}


def json_field(key: str, *, default: Any = MISSING, default_factory: Any = MISSING) -> Any:
    """Declare a response field read from JSON key ``key``."""
    metadata = {"json": key}
    if default_factory is not MISSING:
        return field(default_factory=default_factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def query_field(name: str) -> Any:
    """Declare an optional request parameter sent as query parameter ``name``."""
    return field(default=None, metadata={"query": name})


# ============================================
# Parameter encoding
# ============================================


def encode_params(params: Any) -> dict[str, Any]:
    """Flatten a parameter dataclass (or mapping) into query name -> value.

    Values are returned unformatted; unset fields come back as ``None`` and are
    dropped by the request executor.
    """
    if params is None:
        return {}
    if isinstance(params, Mapping):
        return dict(params)
    if is_dataclass(params) and not isinstance(params, type):
        return {f.metadata.get("query", f.name): getattr(params, f.name) for f in fields(params)}
    raise TypeError(f"Cannot encode {type(params).__name__} as query parameters")


def format_query_value(value: Any) -> str | None:
    """Render a parameter value for the query string, ``None`` when absent."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


# ============================================
# Response decoding
# ============================================


def decode_json(body: str | bytes, result_type: type[T] | Any) -> T:
    """Parse a JSON document and decode it into ``result_type``.

    Documents nested deeper than the interpreter's recursion limit are
    rejected with ``DecodeError`` rather than ``RecursionError``.
    """
    try:
        data = json.loads(body)
    except (ValueError, RecursionError) as e:
        raise DecodeError(f"failed to parse response: {e}") from e
    try:
        return decode(data, result_type)
    except RecursionError as e:
        raise DecodeError(f"response nested too deeply to decode: {e}") from e


def decode(data: Any, result_type: Any, path: str = "$") -> Any:
    """Decode parsed JSON into ``result_type``.

    Supports dataclasses, ``list[X]``, ``dict[str, X]``, ``X | None``, the JSON
    scalars and ``Any`` (passed through untouched). Missing keys keep field
    defaults, unknown keys are ignored and ``null`` on a non-optional field
    yields the type's zero value.

    Raises:
        DecodeError: If a value does not fit the declared type.
    """
    if result_type is Any or result_type is object:
        return data

    origin = get_origin(result_type)
    if origin is Union or origin is UnionType:
        return _decode_union(data, get_args(result_type), path)

    if data is None:
        return _zero_value(result_type)

    if is_dataclass(result_type) and isinstance(result_type, type):
        return _decode_dataclass(data, result_type, path)

    if origin is list or result_type is list:
        if not isinstance(data, list):
            raise _mismatch(data, "array", path)
        args = get_args(result_type)
        item_type = args[0] if args else Any
        return [decode(item, item_type, f"{path}[{i}]") for i, item in enumerate(data)]

    if origin is dict or result_type is dict:
        if not isinstance(data, dict):
            raise _mismatch(data, "object", path)
        args = get_args(result_type)
        value_type = args[1] if len(args) == 2 else Any
        return {key: decode(value, value_type, f"{path}.{key}") for key, value in data.items()}

    if result_type is bool:
        if isinstance(data, bool):
            return data
        raise _mismatch(data, "boolean", path)

    if result_type is int:
        if isinstance(data, int) and not isinstance(data, bool):
            return data
        raise _mismatch(data, "integer", path)

    if result_type is float:
        if isinstance(data, (int, float)) and not isinstance(data, bool):
            return float(data)
        raise _mismatch(data, "number", path)

    if result_type is str:
        if isinstance(data, str):
            return data
        raise _mismatch(data, "string", path)

    raise DecodeError(f"unsupported result type {result_type!r} at {path}", path)


@lru_cache(maxsize=None)
def _field_info(cls: type) -> tuple[tuple[str, str, Any, bool], ...]:
    """(attribute, JSON key, resolved type, has default) for each init field."""
    hints = get_type_hints(cls)
    return tuple(
        (
            f.name,
            f.metadata.get("json", f.name),
            hints[f.name],
            f.default is not MISSING or f.default_factory is not MISSING,
        )
        for f in fields(cls)
        if f.init
    )


def _decode_dataclass(data: Any, cls: type, path: str) -> Any:
    if not isinstance(data, dict):
        raise _mismatch(data, "object", path)

    kwargs: dict[str, Any] = {}
    for name, key, field_type, has_default in _field_info(cls):
        if key in data:
            kwargs[name] = decode(data[key], field_type, f"{path}.{key}")
        elif not has_default:
            kwargs[name] = _zero_value(field_type)
    return cls(**kwargs)


def _decode_union(data: Any, members: tuple[Any, ...], path: str) -> Any:
    if data is None and _NONE_TYPE in members:
        return None

    *others, last = [m for m in members if m is not _NONE_TYPE]
    if data is None:
        return _zero_value(others[0] if others else last)

    for candidate in others:
        try:
            return decode(data, candidate, path)
        except DecodeError:
            continue
    return decode(data, last, path)


def _zero_value(result_type: Any) -> Any:
    if result_type in _ZERO_VALUES:
        return _ZERO_VALUES[result_type]
    origin = get_origin(result_type) or result_type
    if origin is list:
        return []
    if origin is dict:
        return {}
    if is_dataclass(result_type) and isinstance(result_type, type):
        return _decode_dataclass({}, result_type, "$")
    return None


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _mismatch(value: Any, expected: str, path: str) -> DecodeError:
    return DecodeError(f"cannot decode {_json_type_name(value)} into {expected} at {path}", path)
