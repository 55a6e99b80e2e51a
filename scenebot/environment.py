"""State shared by commands while they run."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import dropwhile
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .scene import Scene

__all__ = ["ExecuterState", "CommandEnvironment"]


class ExecuterState:
    """Collects errors reported by commands."""

    def __init__(self) -> None:
        self._errors: list[str] = []

    def report_error(self, error: str) -> None:
        """Record an error message."""
        self._errors.append(error)

    def has_errors(self) -> bool:
        """Return whether any error was recorded."""
        return bool(self._errors)

    def errors(self) -> list[str]:
        """Return a copy of the recorded errors."""
        return list(self._errors)

    def errors_description(self) -> str:
        """Return all errors, one per line."""
        return "\n".join(dropwhile(lambda error: not error, self._errors))


@dataclass
class CommandEnvironment:
    """What a command can reach: the scene and the executer state."""

    scene: Scene
    state: ExecuterState = field(default_factory=ExecuterState)