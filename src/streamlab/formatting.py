"""
Console rendering of example results.

The tutorial examples print their results the way a JVM console shows
them (true/false, null, [a, b], {k=v}), so expected outputs can be
compared across ports as text.
"""

from decimal import Decimal
from typing import Any, Iterable

from streamlab.optional import OptionalValue


def format_value(value: Any) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    if isinstance(value, OptionalValue):
        if value.is_empty():
            return "Optional.empty"
        return f"Optional[{format_value(value.get())}]"
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, dict):
        inner = ", ".join(f"{format_value(k)}={format_value(v)}" for k, v in value.items())
        return "{" + inner + "}"
    if isinstance(value, (set, frozenset)):
        # Sets have no order of their own; sort when possible so output is stable
        try:
            value = sorted(value)
        except TypeError:
            value = list(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_value(v) for v in value) + "]"
    return str(value)


def format_items(items: Iterable[Any], separator: str = "\t") -> str:
    return separator.join(format_value(item) for item in items)
