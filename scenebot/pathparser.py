"""Splitting and joining of slash separated item paths with backslash escapes."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["parse_path_string", "format_path_string"]


def parse_path_string(path: str) -> list[str]:
    """Split ``path`` at unescaped slashes, dropping empty components.

    A backslash makes the following character literal. A trailing lone
    backslash is ignored.
    """
    components: list[str] = []
    current: list[str] = []
    escape_next = False

    for char in path:
        if escape_next:
            current.append(char)
            escape_next = False
        elif char == "\\":
            escape_next = True
        elif char == "/":
            if current:
                components.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        components.append("".join(current))
    return components


def format_path_string(components: Iterable[str]) -> str:
    """Join components with slashes, escaping backslashes and slashes."""
    path = ""
    for component in components:
        if path:
            path += "/"
        path += component.replace("\\", "\\\\").replace("/", "\\/")
    return path