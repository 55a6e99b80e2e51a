"""Conversion between RPC wire values and plain Python values.

Values on the command side are ``None``, ``bool``, ``int``, ``float``,
``str``, ``datetime``, lists of values and dicts from strings to values.
"""

from __future__ import annotations

import xmlrpc.client
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

__all__ = ["InvalidParamsError", "to_variant", "from_variant", "unpack_param", "RpcFunction"]

_DATETIME_FORMATS = ("%Y%m%dT%H:%M:%S", "%Y-%m-%dT%H:%M:%S")

_KINDS = frozenset(
    {"int", "uint", "double", "string", "string_list", "variant", "variant_list"}
)


class InvalidParamsError(ValueError):
    """Raised when RPC parameters have the wrong number or type."""

    code = -32602


def _parse_datetime(text: str) -> datetime:
    for fmt in _DATETIME_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise InvalidParamsError("Invalid parameters: unknown parameter type")


def to_variant(value: Any) -> Any:
    """Convert a decoded RPC value into a plain value.

    Raises InvalidParamsError for binary data, unknown types and dicts
    whose keys are not strings.
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, xmlrpc.client.DateTime):
        return _parse_datetime(value.value)
    if isinstance(value, datetime):
        return value.replace(microsecond=0)
    if isinstance(value, (list, tuple)):
        return [to_variant(element) for element in value]
    if isinstance(value, dict):
        result: dict[str, Any] = {}
        for key, element in value.items():
            if not isinstance(key, str):
                raise InvalidParamsError("Invalid parameters: dict keys must be a string.")
            result[key] = to_variant(element)
        return result
    raise InvalidParamsError("Invalid parameters: unknown parameter type")


def from_variant(value: Any) -> Any:
    """Convert a plain value into one the RPC layer can encode.

    Times lose their fractional seconds. Raises TypeError for values that
    are not plain values.
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, datetime):
        return xmlrpc.client.DateTime(value.replace(microsecond=0))
    if isinstance(value, (list, tuple)):
        return [from_variant(element) for element in value]
    if isinstance(value, dict):
        result: dict[str, Any] = {}
        for key, element in value.items():
            if not isinstance(key, str):
                raise TypeError("from_variant received a map with a non-string key")
            result[key] = from_variant(element)
        return result
    raise TypeError(f"from_variant received a value of unknown type: {type(value).__name__}")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def unpack_param(value: Any, kind: str) -> Any:
    """Check and convert one RPC parameter.

    ``kind`` is one of ``int``, ``uint``, ``double``, ``string``,
    ``string_list``, ``variant`` and ``variant_list``.
    """
    if kind == "variant":
        return to_variant(value)
    if kind == "variant_list":
        if not isinstance(value, (list, tuple)):
            raise InvalidParamsError("Invalid parameters. Expected Array.")
        return [to_variant(element) for element in value]
    if kind == "int":
        if not _is_number(value):
            raise InvalidParamsError("Invalid parameters. Expected Int.")
        return int(value)
    if kind == "double":
        if not _is_number(value):
            raise InvalidParamsError("Invalid parameters. Expected double.")
        return float(value)
    if kind == "uint":
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise InvalidParamsError("Invalid parameters. Expected Int.")
        return value
    if kind == "string":
        if not isinstance(value, str):
            raise InvalidParamsError("Invalid parameters. Expected String.")
        return value
    if kind == "string_list":
        if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
            raise InvalidParamsError("Invalid parameters. Expected Array of Strings.")
        return list(value)
    raise ValueError(f"unknown parameter kind: {kind!r}")


@dataclass(frozen=True)
class RpcFunction:
    """A callable published over RPC whose parameters are checked by kind."""

    name: str
    help: str
    function: Callable[..., Any]
    param_kinds: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        kinds = tuple(self.param_kinds) if isinstance(self.param_kinds, Iterable) else ()
        unknown = [kind for kind in kinds if kind not in _KINDS]
        if unknown:
            raise ValueError(f"unknown parameter kind: {unknown[0]!r}")
        object.__setattr__(self, "param_kinds", kinds)

    def __call__(self, *args: Any) -> Any:
        """Check and convert ``args``, call the function and encode its result."""
        if len(args) != len(self.param_kinds):
            raise InvalidParamsError("Invalid parameters. Number of parameters incorrect.")
        values = [unpack_param(arg, kind) for arg, kind in zip(args, self.param_kinds)]
        return from_variant(self.function(*values))