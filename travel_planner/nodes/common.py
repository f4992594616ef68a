"""Helpers for interpolating raw request values into prompt text.

Request values reach the prompt unvalidated. They are spelled the way the
browser client's own runtime would print them, so a missing field reads as
"undefined" and a JSON null as "null".
"""
from typing import Any


class _Undefined:
    """Marker for a field that was absent from the request body."""

    def __repr__(self):
        return "undefined"

    def __str__(self):
        return "undefined"


UNDEFINED = _Undefined()


def render_value(value: Any) -> str:
    """Render a single request value for prompt interpolation."""
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join("" if item is None else render_value(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def render_list(value: Any, separator: str = ", ") -> str:
    """Join a list value with a separator; anything else renders as a single value."""
    if isinstance(value, list):
        return separator.join("" if item is None else render_value(item) for item in value)
    return render_value(value)
