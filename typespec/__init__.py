"""
typespec - Runtime type specifications with precise diagnostics.

Usage:
    from typespec import array, assert_value, optional, struct

    config_type = struct({
        "name": "string",
        "port": optional("number"),
        "tags": array("string"),
    })

    errors = check_value(config, config_type, name="config")
    assert_value(config, config_type, name="config")  # raises TypeCheckError
"""

from .builders import (
    array,
    extend_literal_union,
    extend_struct,
    literal,
    literal_union,
    optional,
    struct,
    table,
    union,
)
from .context import checking_context
from .errors import TypeCheckError
from .lib.table_helpers import is_numeric
from .matcher import assert_value, check_value, get_type_errors, value_is_type_no_table
from .render import (
    escape_single_quote,
    repr_value,
    type_error_to_string,
    type_to_description,
    where_to_description,
)
from .schema import to_pydantic, validate
from .types import (
    ArrayType,
    Base,
    Err,
    ErrorRecord,
    LiteralType,
    Ok,
    OptionalType,
    Primitive,
    StructType,
    TableKey,
    TableType,
    TableValue,
    TypeSpec,
    UnionType,
    to_type_spec,
)

__all__ = [
    # Result types
    "Ok",
    "Err",
    # Types
    "Primitive",
    "LiteralType",
    "OptionalType",
    "UnionType",
    "TableType",
    "StructType",
    "ArrayType",
    "TypeSpec",
    "to_type_spec",
    "Base",
    "TableKey",
    "TableValue",
    "ErrorRecord",
    "TypeCheckError",
    # Builders
    "literal",
    "optional",
    "union",
    "literal_union",
    "extend_literal_union",
    "struct",
    "extend_struct",
    "table",
    "array",
    # Checking
    "value_is_type_no_table",
    "get_type_errors",
    "check_value",
    "assert_value",
    "checking_context",
    "is_numeric",
    # Rendering
    "type_error_to_string",
    "where_to_description",
    "type_to_description",
    "repr_value",
    "escape_single_quote",
    # Schema
    "validate",
    "to_pydantic",
]
