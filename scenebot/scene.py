"""Interfaces a scene backend provides to commands."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from .geometry import Point, Rect, Size
from .item_path import ItemPath
from .pasteboard import PasteboardContent

__all__ = [
    "MouseButton",
    "KeyModifier",
    "MethodInvocationError",
    "Item",
    "Events",
    "Scene",
]


class MouseButton(enum.IntFlag):
    """Mouse buttons; may be combined."""

    NONE = 0
    LEFT = 1
    RIGHT = 2
    MIDDLE = 4


class KeyModifier(enum.IntFlag):
    """Keyboard modifiers; may be combined."""

    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4
    META = 8


class MethodInvocationError(Exception):
    """Raised when a method cannot be invoked on an item."""


class Item(ABC):
    """An item in a scene that can be queried and changed."""

    @abstractmethod
    def size(self) -> Size:
        """Return the item's size."""

    @abstractmethod
    def position(self) -> Point:
        """Return the item's position on screen."""

    def bounds(self) -> Rect:
        """Return the item's bounding box on screen."""
        return Rect(self.position(), self.size())

    @abstractmethod
    def string_property(self, name: str) -> str:
        """Return a property as a string."""

    @abstractmethod
    def set_string_property(self, name: str, value: str) -> None:
        """Set a property from a string."""

    @abstractmethod
    def invoke_method(self, method: str, args: Sequence[Any]) -> Any:
        """Call a method and return its result.

        Raises MethodInvocationError if the call cannot be made.
        """

    @abstractmethod
    def visible(self) -> bool:
        """Return whether the item is visible."""


class Events(ABC):
    """Input events a scene can deliver to its items."""

    @abstractmethod
    def mouse_down(self, item: Item, loc: Point, button: MouseButton, mod: KeyModifier) -> None:
        """Press a mouse button at ``loc`` inside ``item``."""

    @abstractmethod
    def mouse_up(self, item: Item, loc: Point, button: MouseButton, mod: KeyModifier) -> None:
        """Release a mouse button at ``loc`` inside ``item``."""

    @abstractmethod
    def mouse_move(self, item: Item, loc: Point) -> None:
        """Move the mouse to ``loc`` inside ``item``."""

    @abstractmethod
    def string_input(self, item: Item, text: str) -> None:
        """Type ``text`` into ``item``'s window."""

    @abstractmethod
    def key_press(self, item: Item, key_code: int, mod: KeyModifier) -> None:
        """Press a key."""

    @abstractmethod
    def key_release(self, item: Item, key_code: int, mod: KeyModifier) -> None:
        """Release a key."""

    @abstractmethod
    def ext_mouse_drop(self, item: Item, loc: Point, content: PasteboardContent) -> None:
        """Drop external content at ``loc`` inside ``item``."""

    @abstractmethod
    def quit(self) -> None:
        """Ask the application to quit."""


class Scene(ABC):
    """Access to the items and events of an application."""

    @abstractmethod
    def item_at_path(self, path: ItemPath) -> Item | None:
        """Return the item at ``path`` or None if there is none."""

    @abstractmethod
    def events(self) -> Events:
        """Return the event sink of this scene."""

    @abstractmethod
    def take_screenshot(self, target_item: ItemPath, file_path: str) -> None:
        """Save an image of ``target_item`` to ``file_path``."""

    @abstractmethod
    def take_screenshot_as_base64(self, target_item: ItemPath) -> str:
        """Return an image of ``target_item`` as base64 text."""