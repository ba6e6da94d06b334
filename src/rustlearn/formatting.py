"""Render Python values the way Rust's ``{}`` and ``{:?}`` would print them.

The lessons build Python counterparts of Rust values and print them with
these helpers, so the console output reads like the output of the Rust
program being described: ``true`` instead of ``True``, ``"quoted"``
strings inside collections, ``Some(5)`` for a present optional, and so on.
"""

from __future__ import annotations

import dataclasses
import enum
import math
from typing import Any

_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def _float_display(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return format(value, ".0f")
    text = repr(value)
    if "e" in text:
        # Rust never switches to exponent notation for Display.
        text = format(value, ".20f").rstrip("0").rstrip(".")
    return text


def display(value: Any) -> str:
    """Format ``value`` like Rust's ``Display`` trait (``{}``)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _float_display(value)
    if isinstance(value, str):
        return value
    return str(value)


def _debug_str(value: str) -> str:
    return '"' + "".join(_STRING_ESCAPES.get(ch, ch) for ch in value) + '"'


def _debug_items(items: list[str], open_: str, close: str) -> str:
    return open_ + ", ".join(items) + close


def _variant_name(member_name: str) -> str:
    if not member_name.isupper():
        return member_name
    return "".join(part.capitalize() for part in member_name.split("_"))


def _sorted_if_possible(values: Any) -> list[Any]:
    items = list(values)
    try:
        return sorted(items)
    except TypeError:
        return items


def debug(value: Any) -> str:
    """Format ``value`` like Rust's derived ``Debug`` trait (``{:?}``).

    Dataclass instances render as structs (``Point { x: 1, y: 2 }``) and
    enum members render as their variant name, with upper-case member
    names converted to Rust casing (``POS_OVERFLOW`` becomes
    ``PosOverflow``). Objects may override the rendering by defining
    ``__rust_debug__``.
    """
    hook = getattr(value, "__rust_debug__", None)
    if callable(hook) and not isinstance(value, type):
        return hook()
    if value is None:
        return "None"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        text = _float_display(value)
        if value.is_integer():
            text += ".0"
        return text
    if isinstance(value, str):
        return _debug_str(value)
    if isinstance(value, enum.Enum):
        return _variant_name(value.name)
    if isinstance(value, (bytes, bytearray)):
        return _debug_items([str(b) for b in value], "[", "]")
    if isinstance(value, list):
        return _debug_items([debug(v) for v in value], "[", "]")
    if isinstance(value, tuple):
        if len(value) == 1:
            return f"({debug(value[0])},)"
        return _debug_items([debug(v) for v in value], "(", ")")
    if isinstance(value, dict):
        pairs = [f"{debug(k)}: {debug(v)}" for k, v in value.items()]
        return _debug_items(pairs, "{", "}")
    if isinstance(value, (set, frozenset)):
        return _debug_items([debug(v) for v in _sorted_if_possible(value)], "{", "}")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        fields = {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
        return debug_struct(type(value).__name__, **fields)
    return str(value)


def debug_struct(struct_name: str, /, **fields: Any) -> str:
    """Render a struct-like value: ``Name { a: 1, b: "x" }``; bare ``Name`` without fields."""
    if not fields:
        return struct_name
    body = ", ".join(f"{key}: {debug(val)}" for key, val in fields.items())
    return f"{struct_name} {{ {body} }}"


def debug_tuple(variant_name: str, /, *fields: Any) -> str:
    """Render a tuple-like variant: ``Name(1, "x")``."""
    return f"{variant_name}({', '.join(debug(f) for f in fields)})"


def some(value: Any) -> str:
    """Render an optional value as Rust's ``Option`` Debug output."""
    if value is None:
        return "None"
    return debug_tuple("Some", value)


def format_duration(seconds: float) -> str:
    """Render an elapsed time the way ``Duration``'s Debug output does.

    The value is rounded to whole nanoseconds and shown in the largest unit
    that keeps the integral part non-zero, e.g. ``1.5µs`` or ``12.34ms``.
    """
    nanos = max(0, int(round(seconds * 1_000_000_000)))
    for unit, scale in (("s", 1_000_000_000), ("ms", 1_000_000), ("µs", 1_000)):
        if nanos >= scale:
            whole, rest = divmod(nanos, scale)
            if not rest:
                return f"{whole}{unit}"
            digits = len(str(scale)) - 1
            fraction = str(rest).rjust(digits, "0").rstrip("0")
            return f"{whole}.{fraction}{unit}"
    return f"{nanos}ns"


def rprint(*values: Any, sep: str = " ") -> None:
    """``print`` every value through :func:`display`."""
    print(sep.join(display(v) for v in values))
