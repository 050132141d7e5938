"""
Runtime type checking for typespec.

Walks a value and a TypeSpec in lock-step, collecting ErrorRecords that
locate each mismatch by path.
"""

from __future__ import annotations

import logging
from typing import Any

from .context import default_max_depth
from .errors import TypeCheckError
from .lib.table_helpers import (
    array_elements,
    is_table,
    literal_equals,
    runtime_type,
    table_entries,
    table_get,
)
from .render import type_error_to_string
from .types import (
    ArrayType,
    Base,
    ErrorRecord,
    LiteralType,
    OptionalType,
    PathSegment,
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

logger = logging.getLogger(__name__)


def value_is_type_no_table(value: Any, type_spec: TypeSpec | str) -> bool:
    """
    Whether a value satisfies a type, ignoring table contents. Table contents
    are checked in get_type_errors.
    """
    match to_type_spec(type_spec):
        case Primitive.ANY:
            return True
        case Primitive.NEVER:
            return False
        case Primitive() as primitive:
            return runtime_type(value) == primitive
        case LiteralType(value=expected):
            return literal_equals(value, expected)
        case OptionalType(inner=inner):
            return value is None or value_is_type_no_table(value, inner)
        case UnionType(options=options):
            return any(value_is_type_no_table(value, option) for option in options)
        case TableType() | StructType() | ArrayType():
            return is_table(value)
    return True


class _Matcher:
    """Holds the options of a single get_type_errors call."""

    def __init__(self, max_depth: int | None):
        self.max_depth = max_depth

    def recurse_on_table(self, depth: int) -> bool:
        return self.max_depth is None or depth < self.max_depth

    def errors(
        self, value: Any, type_spec: TypeSpec, where: Where, depth: int
    ) -> list[ErrorRecord]:
        if not value_is_type_no_table(value, type_spec):
            return [ErrorRecord(value=value, type=type_spec, where=where)]

        match type_spec:
            case OptionalType(inner=inner):
                if value is None:
                    return []
                return self.errors(value, inner, where, depth)

            case UnionType(options=options):
                errors: list[ErrorRecord] = []
                for option in options:
                    errors = self.errors(value, option, where, depth)
                    if not errors:
                        break
                return errors

        if not self.recurse_on_table(depth):
            return []

        match type_spec:
            case TableType(key_type=key_type, value_type=value_type):
                for key, item in table_entries(value):
                    errors = self.child(key, key_type, where, TableKey(key), depth)
                    errors += self.child(item, value_type, where, TableValue(key), depth)
                    if errors:
                        return errors
                return []

            case StructType(fields=fields):
                errors = []
                for field_name, field_type in fields.items():
                    errors.extend(
                        self.child(
                            table_get(value, field_name),
                            field_type,
                            where,
                            TableValue(field_name),
                            depth,
                        )
                    )
                return errors

            case ArrayType(elem_type=elem_type):
                for ix, elem in array_elements(value):
                    errors = self.child(elem, elem_type, where, TableValue(ix), depth)
                    if errors:
                        return errors
                return []

        return []

    def child(
        self,
        value: Any,
        type_spec: TypeSpec,
        where: Where,
        segment: PathSegment,
        depth: int,
    ) -> list[ErrorRecord]:
        return self.errors(value, type_spec, (*where, segment), depth + 1)


def get_type_errors(
    value: Any,
    type_spec: TypeSpec | str,
    *,
    max_depth: int | None = None,
    name: str | None = None,
) -> list[ErrorRecord]:
    """
    Check a value against a type and return every error found.

    Args:
        value: The value to check
        type_spec: Type the value should satisfy
        max_depth: Bound on descent into table contents. Defaults to the
                   enclosing checking_context, else unbounded.
        name: Label for the value, used as the root of error paths

    Returns:
        List of ErrorRecords, empty if the value satisfies the type
    """
    if max_depth is None:
        max_depth = default_max_depth()
    where: Where = (Base(name),) if name is not None else ()

    errors = _Matcher(max_depth).errors(value, to_type_spec(type_spec), where, 0)
    logger.debug("Type check of %s found %d error(s)", name or "value", len(errors))
    return errors


def check_value(
    value: Any,
    type_spec: TypeSpec | str,
    *,
    max_depth: int | None = None,
    name: str | None = None,
) -> list[str]:
    """Checks, at runtime, whether a value satisfies a type."""
    return [
        type_error_to_string(error)
        for error in get_type_errors(value, type_spec, max_depth=max_depth, name=name)
    ]


def assert_value(
    value: Any,
    type_spec: TypeSpec | str,
    *,
    max_depth: int | None = None,
    name: str | None = None,
) -> None:
    """
    Checks, at runtime, whether a value satisfies a type, and raises if not.

    Raises:
        TypeCheckError: With one message line per type error
    """
    errors = get_type_errors(value, type_spec, max_depth=max_depth, name=name)
    if errors:
        messages = [type_error_to_string(error) for error in errors]
        logger.debug("Assertion failed with %d type error(s)", len(messages))
        raise TypeCheckError(errors, messages)
