"""Base class for commands run against a scene, and a callback based command."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from .environment import CommandEnvironment

__all__ = ["Command", "CustomCmd"]


class Command(ABC):
    """A unit of work executed on the main thread against a scene."""

    @abstractmethod
    def execute(self, env: CommandEnvironment) -> None:
        """Perform the command."""

    def can_execute_now(self, env: CommandEnvironment) -> bool:
        """Return whether the command is ready to run; by default always."""
        return True


class CustomCmd(Command):
    """A command whose behaviour is given by two callables."""

    def __init__(
        self,
        exec_function: Callable[[CommandEnvironment], None],
        can_exec_function: Callable[[], bool],
    ) -> None:
        self._exec = exec_function
        self._can_exec = can_exec_function

    def execute(self, env: CommandEnvironment) -> None:
        """Call the execute callable with the environment."""
        self._exec(env)

    def can_execute_now(self, env: CommandEnvironment) -> bool:
        """Return what the readiness callable returns."""
        return bool(self._can_exec())