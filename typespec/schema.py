"""
Schema operations for typespec.

Provides validate() and to_pydantic() functions.
"""

from __future__ import annotations

from typing import Any, Callable
from typing import Literal as TypingLiteral
from typing import Optional as TypingOptional
from typing import Union as TypingUnion

from pydantic import StrictBool, StrictFloat, StrictInt, StrictStr, create_model

from .matcher import check_value
from .types import (
    ArrayType,
    Err,
    LiteralType,
    Ok,
    OptionalType,
    Primitive,
    StructType,
    TableType,
    TypeSpec,
    UnionType,
    to_type_spec,
)

_PRIMITIVE_HINTS: dict[Primitive, Any] = {
    Primitive.STRING: StrictStr,
    Primitive.NUMBER: TypingUnion[StrictInt, StrictFloat],
    Primitive.BOOLEAN: StrictBool,
    Primitive.FUNCTION: Callable,
    Primitive.TABLE: TypingUnion[dict, list],
    Primitive.NIL: type(None),
    Primitive.ANY: Any,
}


def validate(
    value: Any,
    type_spec: TypeSpec | str,
    *,
    max_depth: int | None = None,
    name: str | None = None,
) -> Ok[Any] | Err[list[str]]:
    """
    Validate a value against a type.

    Returns:
        Ok(value) if validation passes
        Err([message, ...]) if validation fails

    Usage:
        config_type = struct({
            "name": "string",
            "retries": optional("number"),
        })
        result = validate({"name": "worker"}, config_type, name="config")
    """
    messages = check_value(value, type_spec, max_depth=max_depth, name=name)
    return Err(messages) if messages else Ok(value)


def to_pydantic(name: str, type_spec: StructType) -> type:
    """
    Compile a structural type to a Pydantic model.

    Args:
        name: Name of the generated model class
        type_spec: Structural type describing the model fields

    Returns:
        A Pydantic BaseModel subclass

    Usage:
        User = to_pydantic("User", struct({
            "name": "string",
            "email": optional("string"),
        }))
        user = User(name="Alice")
    """
    if not isinstance(type_spec, StructType):
        raise TypeError("Schema must be a structural type")

    fields: dict[str, Any] = {}
    for key, field_type in type_spec.fields.items():
        hint = _to_hint(field_type, f"{name}{key.title().replace('_', '')}")
        default = None if _accepts_nil(field_type) else ...
        fields[key] = (hint, default)

    return create_model(name, **fields)


def _accepts_nil(type_spec: TypeSpec) -> bool:
    match type_spec:
        case Primitive.NIL | Primitive.ANY | OptionalType():
            return True
        case UnionType(options=options):
            return any(_accepts_nil(option) for option in options)
    return False


def _to_hint(type_spec: TypeSpec | str, model_name: str) -> Any:
    """Extract the Pydantic field annotation for a type."""
    match to_type_spec(type_spec):
        case Primitive.NEVER:
            raise TypeError("Type 'never' has no Pydantic equivalent")
        case Primitive() as primitive:
            return _PRIMITIVE_HINTS[primitive]
        case LiteralType(value=value):
            return TypingLiteral[value]
        case OptionalType(inner=inner):
            return TypingOptional[_to_hint(inner, model_name)]
        case UnionType(options=()):
            raise TypeError("Empty union has no Pydantic equivalent")
        case UnionType(options=options):
            return TypingUnion[tuple(_to_hint(o, model_name) for o in options)]
        case TableType(key_type=key_type, value_type=value_type):
            return dict[_to_hint(key_type, model_name), _to_hint(value_type, model_name)]  # type: ignore[misc]
        case StructType() as nested:
            return to_pydantic(model_name, nested)
        case ArrayType(elem_type=elem_type):
            return list[_to_hint(elem_type, model_name)]  # type: ignore[misc]
    return Any
