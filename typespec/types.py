"""
Type definitions for typespec.

Provides the TypeSpec sum type, path segments, error records, and a minimal
Result type (Ok/Err).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Generic, Mapping, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")

OPTIONAL_MARKER = "?"


class Primitive(str, Enum):
    """Primitive type tags. Compare equal to their plain-text spelling."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    FUNCTION = "function"
    TABLE = "table"
    NIL = "nil"
    ANY = "any"
    NEVER = "never"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class LiteralType:
    """Matches only values equal to `value`."""

    value: Any


@dataclass(frozen=True, slots=True)
class OptionalType:
    """Matches nil, or anything matching `inner`."""

    inner: TypeSpec


@dataclass(frozen=True, slots=True)
class UnionType:
    """Matches a value if any option matches. Options are tried in order."""

    options: tuple[TypeSpec, ...]


@dataclass(frozen=True, slots=True)
class TableType:
    """Table whose every key and every value satisfy the given types."""

    key_type: TypeSpec = Primitive.ANY
    value_type: TypeSpec = Primitive.ANY


@dataclass(frozen=True, slots=True)
class StructType:
    """
    Non-strict structural type for tables. Tables may have additional entries
    not in the structural type.
    """

    fields: Mapping[str, TypeSpec]

    def __post_init__(self):
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __hash__(self) -> int:
        return hash(tuple(self.fields.items()))


@dataclass(frozen=True, slots=True)
class ArrayType:
    """
    Type for tables that are arrays. Not strict - arrays may have additional
    fields besides numeric indexes, and may have gaps in indexes.
    """

    elem_type: TypeSpec = Primitive.ANY


TypeSpec = Union[
    Primitive, LiteralType, OptionalType, UnionType, TableType, StructType, ArrayType
]
COMPOUND_TYPES = (LiteralType, OptionalType, UnionType, TableType, StructType, ArrayType)


@dataclass(frozen=True, slots=True)
class Base:
    """Caller-supplied root name."""

    name: str


@dataclass(frozen=True, slots=True)
class TableKey:
    """Key side of a table entry."""

    key: Any


@dataclass(frozen=True, slots=True)
class TableValue:
    """Value side of the table entry keyed by `key`."""

    key: Any


PathSegment = Union[Base, TableKey, TableValue]
Where = tuple[PathSegment, ...]


@dataclass(frozen=True, slots=True)
class ErrorRecord:
    """A value that did not satisfy `type`, located by `where`."""

    value: Any
    type: TypeSpec
    where: Where = ()


def to_type_spec(spec: Any) -> TypeSpec:
    """
    Coerce caller input to a TypeSpec.

    Conversion rules:
        compound node -> pass through
        Primitive -> pass through
        "number" -> Primitive.NUMBER
        "number?" -> OptionalType(Primitive.NUMBER)

    Raises:
        TypeError: If the input does not describe a type
    """
    if isinstance(spec, COMPOUND_TYPES) or isinstance(spec, Primitive):
        return spec

    if isinstance(spec, str):
        if spec.endswith(OPTIONAL_MARKER):
            return OptionalType(to_type_spec(spec.rstrip(OPTIONAL_MARKER)))
        try:
            return Primitive(spec)
        except ValueError:
            raise TypeError(f"Unknown primitive type: {spec!r}") from None

    raise TypeError(f"Cannot convert {type(spec).__name__} to type spec")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True
