"""Item paths made of selector components."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Union

from .pathparser import format_path_string, parse_path_string

__all__ = [
    "NameSelector",
    "PropertySelector",
    "TypeSelector",
    "ValueSelector",
    "PropertyValueSelector",
    "Selector",
    "Component",
    "ItemPath",
]


@dataclass(frozen=True)
class NameSelector:
    """Matches an object by its name."""

    name: str


@dataclass(frozen=True)
class PropertySelector:
    """Follows the object held in a property."""

    name: str


@dataclass(frozen=True)
class TypeSelector:
    """Matches an object by its type name."""

    type: str


@dataclass(frozen=True)
class ValueSelector:
    """Matches an object by its text value."""

    value: str


@dataclass(frozen=True)
class PropertyValueSelector:
    """Matches an object whose property has the given value."""

    property_name: str
    property_value: str


Selector = Union[NameSelector, PropertySelector, TypeSelector, ValueSelector, PropertyValueSelector]


@dataclass(frozen=True)
class Component:
    """One step of an item path."""

    selector: Selector

    @classmethod
    def parse(cls, raw_value: str) -> Component:
        """Build a component from its textual form."""
        if raw_value.startswith("."):
            return cls(PropertySelector(raw_value[1:]))
        if raw_value.startswith("#"):
            return cls(TypeSelector(raw_value[1:]))
        if len(raw_value) >= 2 and raw_value[0] == '"' and raw_value[-1] == '"':
            return cls(ValueSelector(raw_value[1:-1]))
        if len(raw_value) >= 2 and raw_value[0] == "(" and raw_value[-1] == ")":
            name, sep, value = raw_value[1:-1].partition("=")
            if sep:
                return cls(PropertyValueSelector(name, value))
        return cls(NameSelector(raw_value))

    def __str__(self) -> str:
        match self.selector:
            case NameSelector(name=name):
                return name
            case PropertySelector(name=name):
                return "." + name
            case TypeSelector(type=type_name):
                return "#" + type_name
            case ValueSelector(value=value):
                return '"' + value + '"'
            case PropertyValueSelector(property_name=name, property_value=value):
                return f"({name}={value})"
        return ""


class ItemPath:
    """A sequence of components locating an item in a scene."""

    def __init__(self, path: str | ItemPath | Iterable[Component] | None = None) -> None:
        if path is None:
            self._components: tuple[Component, ...] = ()
        elif isinstance(path, str):
            self._components = tuple(Component.parse(raw) for raw in parse_path_string(path))
        elif isinstance(path, ItemPath):
            self._components = path._components
        else:
            self._components = tuple(path)

    @property
    def components(self) -> tuple[Component, ...]:
        """The components of this path."""
        return self._components

    def root_component(self) -> Component:
        """Return the first component; raise IndexError for an empty path."""
        if not self._components:
            raise IndexError("item path is empty")
        return self._components[0]

    def sub_path(self, offset: int) -> ItemPath:
        """Return the path without its first ``offset`` components."""
        if offset >= len(self._components):
            return ItemPath()
        return ItemPath(self._components[offset:])

    def __str__(self) -> str:
        return format_path_string(str(component) for component in self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[Component]:
        return iter(self._components)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ItemPath):
            return NotImplemented
        return self._components == other._components

    def __hash__(self) -> int:
        return hash(self._components)

    def __repr__(self) -> str:
        return f"ItemPath({str(self)!r})"