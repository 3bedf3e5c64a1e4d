"""Textual rendering of values inside matcher messages.

Maps render as ``Map(k -> v)``, pairs as ``(k,v)``, sequences as
``List(...)``. Plain strings render without quotes; ``quote`` adds the
single quotes used around expected values.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
from typing import Any

__all__ = ["describe", "describe_quoted", "quote", "render"]


def render(value: Any) -> str:
    """Render a value for a matcher message."""
    match value:
        case None:
            return "null"
        case bool():
            return "true" if value else "false"
        case str():
            return value
        case Mapping():
            pairs = ", ".join(f"{render(k)} -> {render(v)}" for k, v in value.items())
            return f"Map({pairs})"
        case tuple():
            return "(" + ",".join(render(item) for item in value) + ")"
        case Set():
            return "Set(" + ", ".join(render(item) for item in value) + ")"
        case Sequence() if not isinstance(value, (bytes, bytearray)):
            return "List(" + ", ".join(render(item) for item in value) + ")"
        case _:
            return str(value)


def quote(value: Any) -> str:
    return f"'{render(value)}'"


def describe(value: Any, description: str | None) -> str:
    """Render the subject, prefixed by its description when one is set."""
    if description is None:
        return render(value)
    return f"{description} {render(value)}"


def describe_quoted(value: Any, description: str | None) -> str:
    """Like describe(), but with the rendered value quoted."""
    if description is None:
        return quote(value)
    return f"{description} {quote(value)}"
