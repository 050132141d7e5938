"""
Helper functions for treating Python containers as tables.

Mappings and non-text sequences are both tables. Sequences are addressed by
1-based integer keys, and a None slot counts as an absent entry.
"""

import math
from collections.abc import Mapping, Sequence
from numbers import Number
from typing import Any, Iterator

from ..types import Primitive

_TEXT_TYPES = (str, bytes, bytearray)


def is_table(value: Any) -> bool:
    """Check whether a value is table-like."""
    if isinstance(value, Mapping):
        return True
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def runtime_type(value: Any) -> Primitive | None:
    """Primitive tag of a value, or None if it has none."""
    if value is None:
        return Primitive.NIL
    if isinstance(value, bool):
        return Primitive.BOOLEAN
    if isinstance(value, Number):
        return Primitive.NUMBER
    if isinstance(value, str):
        return Primitive.STRING
    if is_table(value):
        return Primitive.TABLE
    if callable(value):
        return Primitive.FUNCTION
    return None


def table_get(table: Any, key: Any) -> Any:
    """Look up a key in a table. Absent keys give None."""
    if isinstance(table, Mapping):
        return table.get(key)
    if isinstance(key, int) and not isinstance(key, bool) and 1 <= key <= len(table):
        return table[key - 1]
    return None


def table_entries(table: Any) -> Iterator[tuple[Any, Any]]:
    """Iterate (key, value) pairs of a table, skipping absent entries."""
    entries = table.items() if isinstance(table, Mapping) else enumerate(table, start=1)
    for key, elem in entries:
        if elem is not None:
            yield key, elem


def array_elements(table: Any) -> Iterator[tuple[int, Any]]:
    """Iterate (index, element) from index 1 up to the first gap."""
    ix = 1
    while True:
        elem = table_get(table, ix)
        if elem is None:
            return
        yield ix, elem
        ix += 1


def literal_equals(value: Any, expected: Any) -> bool:
    """Equality that keeps booleans distinct from numbers."""
    if isinstance(value, bool) != isinstance(expected, bool):
        return False
    try:
        return bool(value == expected)
    except (TypeError, ValueError):
        return False


def is_numeric(value: Any) -> bool:
    """
    Check whether a value can be read as a finite number. Text may be decimal
    or 0x-prefixed hexadecimal.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, str) and value.strip().lower().lstrip("+-").startswith("0x"):
        try:
            int(value.strip(), 16)
        except ValueError:
            return False
        return True
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return False
    return math.isfinite(number)
