"""
Human-readable descriptions of type errors, paths, and types.
"""

from __future__ import annotations

import re
from typing import Any

from .types import (
    ArrayType,
    Base,
    ErrorRecord,
    LiteralType,
    OptionalType,
    Primitive,
    StructType,
    TableKey,
    TableType,
    TableValue,
    TypeSpec,
    UnionType,
    Where,
    to_type_spec,
)

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z0-9_]+")


def type_error_to_string(type_error: ErrorRecord) -> str:
    """
    Render an ErrorRecord as one line.

    Example:
        "Unexpected value in config.port. Found: 'x' Expected: value of type number"
    """
    where_description = where_to_description(type_error.where)
    location = f" in {where_description}" if where_description else ""
    return (
        f"Unexpected value{location}. Found: {to_text(type_error.value)}"
        f" Expected: value of type {type_to_description(type_error.type)}"
    )


def where_to_description(where: Where) -> str | None:
    """Fold a path into a description, or None if there is nothing to say."""
    s: str | None = None
    for segment in where:
        match segment:
            case Base(name=name):
                s = name
            case TableKey(key=key):
                s = f"key {repr_value(key)}" + (f" of {s}" if s else "")
            case TableValue(key=key):
                if s and isinstance(key, str) and IDENTIFIER_PATTERN.fullmatch(key):
                    s = f"{s}.{key}"
                elif s:
                    s = f"{s}[{repr_value(key)}]"
                else:
                    s = f"table entry {repr_value(key)}"
    return s


def escape_single_quote(text: str) -> str:
    return text.replace("'", "\\'")


def to_text(value: Any) -> str:
    """Default textual form of a value, spelled in primitive type vocabulary."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def repr_value(value: Any) -> str:
    """Quote strings; everything else renders as its default textual form."""
    if isinstance(value, str):
        return f"'{escape_single_quote(value)}'"
    return to_text(value)


def type_to_description(type_spec: TypeSpec | str) -> str:
    """
    Short description of a type. Table types are described coarsely, without
    field or element detail.
    """
    match to_type_spec(type_spec):
        case Primitive() as primitive:
            return primitive.value
        case LiteralType(value=value):
            return repr_value(value)
        case OptionalType(inner=inner):
            return f"optional {type_to_description(inner)}"
        case UnionType(options=options):
            return " or ".join(type_to_description(option) for option in options)
        case TableType():
            return "table"
        case StructType():
            return "structural table"
        case ArrayType():
            return "array table"
    raise TypeError(f"Cannot describe {type(type_spec).__name__}")
