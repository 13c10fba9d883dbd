"""One-line bracketed rendering of ordered sequences."""

from __future__ import annotations

from typing import Any, Iterable, Optional, TextIO


def format_sequence(values: Iterable[Any]) -> str:
    """Render ``values`` as ``[e0, e1, ..., eN]``.

    An empty sequence renders as an empty string, without brackets.
    """
    items = [str(value) for value in values]
    if not items:
        return ""
    return "[" + ", ".join(items) + "]"


def print_sequence(values: Iterable[Any], stream: Optional[TextIO] = None) -> None:
    print(format_sequence(values), file=stream)
