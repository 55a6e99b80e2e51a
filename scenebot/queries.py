"""Commands that answer a question about the scene through a future."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from concurrent.futures import Future
from typing import Any

from .command import Command
from .environment import CommandEnvironment
from .geometry import Rect
from .item_path import ItemPath
from .scene import MethodInvocationError

__all__ = [
    "ExistsAndVisible",
    "GetBoundingBox",
    "GetProperty",
    "GetTestStatus",
    "InvokeMethod",
    "ScreenshotAsBase64",
    "WaitForItem",
]


class _Query(Command):
    """A command whose answer is delivered through ``self.future``."""

    def __init__(self, future: Future | None = None) -> None:
        self.future: Future = future if future is not None else Future()


class ExistsAndVisible(_Query):
    """Answer whether the item exists and is visible."""

    def __init__(self, path: ItemPath | str, future: Future | None = None) -> None:
        super().__init__(future)
        self.path = ItemPath(path)

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self.path)
        self.future.set_result(item.visible() if item is not None else False)


class GetBoundingBox(_Query):
    """Answer the item's bounding box in screen coordinates."""

    def __init__(self, path: ItemPath | str, future: Future | None = None) -> None:
        super().__init__(future)
        self.path = ItemPath(path)

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self.path)
        if item is not None:
            self.future.set_result(item.bounds())
        else:
            self.future.set_result(Rect.from_values(0.0, 0.0, 0.0, 0.0))
            env.state.report_error(f"GetBoundingBox: Item not found: {self.path}")


class GetProperty(_Query):
    """Answer a property of the item as a string."""

    def __init__(
        self, path: ItemPath | str, property_name: str, future: Future | None = None
    ) -> None:
        super().__init__(future)
        self.path = ItemPath(path)
        self.property_name = property_name

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self.path)
        if item is not None:
            self.future.set_result(item.string_property(self.property_name))
        else:
            self.future.set_result("")
            env.state.report_error(f"GetProperty: Item not found: {self.path}")


class GetTestStatus(_Query):
    """Answer the errors reported so far."""

    def __init__(self, errors_only: bool = True, future: Future | None = None) -> None:
        super().__init__(future)
        self.errors_only = errors_only

    def execute(self, env: CommandEnvironment) -> None:
        self.future.set_result(env.state.errors())


class InvokeMethod(_Query):
    """Call a method on the item and answer its return value."""

    def __init__(
        self,
        path: ItemPath | str,
        method: str,
        args: Sequence[Any] = (),
        future: Future | None = None,
    ) -> None:
        super().__init__(future)
        self.path = ItemPath(path)
        self.method = method
        self.args = list(args)

    def execute(self, env: CommandEnvironment) -> None:
        item = env.scene.item_at_path(self.path)
        if item is None:
            env.state.report_error(f"InvokeMethod: Item not found: {self.path}")
            self.future.set_result(None)
            return
        try:
            result = item.invoke_method(self.method, self.args)
        except MethodInvocationError:
            env.state.report_error(f"InvokeMethod: Failed to invoke method: {self.method}")
            result = None
        self.future.set_result(result)


class ScreenshotAsBase64(_Query):
    """Answer an image of the item as base64 text."""

    def __init__(self, target_item_path: ItemPath | str, future: Future | None = None) -> None:
        super().__init__(future)
        self.item_path = ItemPath(target_item_path)

    def execute(self, env: CommandEnvironment) -> None:
        self.future.set_result(env.scene.take_screenshot_as_base64(self.item_path))


class WaitForItem(_Query):
    """Hold back the queue until an item appears or a time limit passes.

    The answer is whether the item was found and visible. The timer starts
    the first time readiness is checked; that first check always answers no.
    """

    def __init__(
        self,
        path: ItemPath | str,
        max_wait_ms: float,
        future: Future | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(future)
        self.path = ItemPath(path)
        self.max_wait_ms = max_wait_ms
        self._clock = clock
        self._start_time: float | None = None
        self._item_found = False

    def execute(self, env: CommandEnvironment) -> None:
        self.future.set_result(self._item_found)

    def can_execute_now(self, env: CommandEnvironment) -> bool:
        if self._start_time is None:
            self._start_time = self._clock()
            return False
        item = env.scene.item_at_path(self.path)
        if item is not None:
            self._item_found = item.visible()
            return True
        elapsed_ms = (self._clock() - self._start_time) * 1000.0
        return elapsed_ms >= self.max_wait_ms