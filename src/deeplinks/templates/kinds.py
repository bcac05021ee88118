"""Value kinds and their textual conversions.

Every capture and query parameter declares one of four kinds.  Parsing is
strict: ``int`` rejects whitespace and underscores that Python's ``int()``
would accept, and ``bool`` only knows the literal tokens ``true``/``false``.
"""

import math
import re
from enum import StrEnum
from typing import Any, TypeAlias

# A typed value held in a ValueBag
Value: TypeAlias = int | float | bool | str


class ValueKind(StrEnum):
    """The type a capture or query parameter is declared with."""

    INT = "int"
    DOUBLE = "double"
    BOOL = "bool"
    STRING = "string"

    @property
    def python_type(self) -> type:
        return _PYTHON_TYPES[self]


_PYTHON_TYPES: dict[ValueKind, type] = {
    ValueKind.INT: int,
    ValueKind.DOUBLE: float,
    ValueKind.BOOL: bool,
    ValueKind.STRING: str,
}

# full-match pattern for each kind that needs validation before conversion
PATTERNS: dict[ValueKind, re.Pattern[str]] = {
    ValueKind.INT: re.compile(r"[+-]?[0-9]+"),
    ValueKind.DOUBLE: re.compile(
        r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
        re.IGNORECASE,
    ),
    ValueKind.BOOL: re.compile(r"true|false"),
}


def parse_value(text: str, kind: ValueKind, *, int_bits: int = 64) -> Value:
    """Convert *text* to a value of *kind*.

    Raises ``ValueError`` if *text* is not a canonical spelling of *kind*,
    or if an ``int`` falls outside the signed *int_bits* range.
    """
    kind = ValueKind(kind)
    if kind is ValueKind.STRING:
        return text

    if PATTERNS[kind].fullmatch(text) is None:
        msg = f"{text!r} is not a valid {kind}"
        raise ValueError(msg)

    if kind is ValueKind.BOOL:
        return text == "true"

    if kind is ValueKind.INT:
        number = int(text)
        limit = 1 << (int_bits - 1)
        if not -limit <= number < limit:
            msg = f"{text!r} overflows a {int_bits}-bit int"
            raise ValueError(msg)
        return number

    number = float(text)
    if math.isinf(number) and "inf" not in text.lower():
        # decimal overflow, e.g. "1e999"
        msg = f"{text!r} overflows a double"
        raise ValueError(msg)
    return number


def try_parse(text: str, kind: ValueKind, *, int_bits: int = 64) -> Value | None:
    """Like ``parse_value`` but returns ``None`` on failure."""
    try:
        return parse_value(text, kind, int_bits=int_bits)
    except ValueError:
        return None


def kind_of(value: Any) -> ValueKind | None:
    """Return the kind a Python value belongs to, or ``None``.

    ``bool`` is checked by exact type so ``True`` is never reported as an
    ``int``.
    """
    for kind, python_type in _PYTHON_TYPES.items():
        if type(value) is python_type:
            return kind
    return None


def format_value(value: Any) -> str:
    """Render *value* the way it appears in a URL.

    ``bool`` becomes ``true``/``false`` and ``float`` uses ``repr`` so
    ``3.0`` stays ``"3.0"``; everything else goes through ``str``.
    No percent-escaping is applied.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    return str(value)
