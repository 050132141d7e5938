"""
Type spec builders for typespec.

Pure factory functions that assemble TypeSpec values. They never inspect
the values a spec will later be checked against.
"""

from __future__ import annotations

from typing import Any, Mapping

from .types import (
    ArrayType,
    LiteralType,
    OptionalType,
    Primitive,
    StructType,
    TableType,
    TypeSpec,
    UnionType,
    to_type_spec,
)


def literal(value: Any) -> LiteralType:
    """
    Match exactly one value.

    Usage:
        literal("left")
        literal(3)
    """
    return LiteralType(value)


def optional(type_spec: TypeSpec | str) -> OptionalType:
    """
    Allow nil, validate if present. Wrapping an optional type is a no-op.

    Usage:
        optional("number")
        optional(struct({"id": "number"}))
    """
    inner = to_type_spec(type_spec)
    if isinstance(inner, OptionalType):
        return inner
    return OptionalType(inner)


def union(*types: TypeSpec | str) -> UnionType:
    """
    Match any of several types, tried in order.

    Usage:
        union("string", "number")
    """
    return UnionType(tuple(to_type_spec(t) for t in types))


def literal_union(*values: Any) -> UnionType:
    """
    Match any one of several literal values.

    Usage:
        literal_union("left", "right", "center")
    """
    return UnionType(tuple(literal(v) for v in values))


def extend_literal_union(union_type: UnionType, *values: Any) -> UnionType:
    """Return a copy of a union with more literal options appended."""
    return UnionType(union_type.options + tuple(literal(v) for v in values))


def struct(fields: Mapping[str, TypeSpec | str]) -> StructType:
    """
    Non-strict structural table type.

    Usage:
        struct({"name": "string", "age": optional("number")})
    """
    return StructType({name: to_type_spec(t) for name, t in fields.items()})


def extend_struct(
    struct_type: StructType, fields: Mapping[str, TypeSpec | str]
) -> StructType:
    """Add fields to a structural type. New fields override existing ones."""
    return StructType({**struct_type.fields, **struct(fields).fields})


def table(
    key_type: TypeSpec | str | None = None, value_type: TypeSpec | str | None = None
) -> TypeSpec:
    """
    Table type. Without arguments this is the bare table primitive.

    Usage:
        table()                     # any table
        table("string", "number")   # string -> number mapping
    """
    if key_type is None and value_type is None:
        return Primitive.TABLE
    return TableType(
        to_type_spec(key_type if key_type is not None else Primitive.ANY),
        to_type_spec(value_type if value_type is not None else Primitive.ANY),
    )


def array(elem_type: TypeSpec | str | None = None) -> ArrayType:
    """
    Array table type.

    Usage:
        array("string")
        array(struct({"id": "number"}))
    """
    if elem_type is None:
        return ArrayType()
    return ArrayType(to_type_spec(elem_type))
