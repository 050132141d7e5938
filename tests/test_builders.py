"""
Tests for typespec.builders.
"""

import pytest

from typespec import (
    ArrayType,
    LiteralType,
    OptionalType,
    Primitive,
    StructType,
    TableType,
    UnionType,
    array,
    extend_literal_union,
    extend_struct,
    literal,
    literal_union,
    optional,
    struct,
    table,
    to_type_spec,
    union,
)


class TestToTypeSpec:
    def test_primitive_text(self):
        assert to_type_spec("string") is Primitive.STRING
        assert to_type_spec("never") is Primitive.NEVER

    def test_primitive_compares_to_text(self):
        assert Primitive.NUMBER == "number"
        assert str(Primitive.NUMBER) == "number"

    def test_optional_marker(self):
        assert to_type_spec("number?") == OptionalType(Primitive.NUMBER)
        assert to_type_spec("number??") == OptionalType(Primitive.NUMBER)

    def test_nodes_pass_through(self):
        node = struct({"id": "number"})
        assert to_type_spec(node) is node

    def test_unknown_text(self):
        with pytest.raises(TypeError):
            to_type_spec("strnig")

    def test_not_a_type(self):
        with pytest.raises(TypeError):
            to_type_spec(42)


class TestBuilders:
    def test_literal(self):
        assert literal("x") == LiteralType("x")

    def test_optional(self):
        assert optional("number") == OptionalType(Primitive.NUMBER)

    def test_optional_idempotent(self):
        once = optional(struct({"id": "number"}))
        assert optional(once) is once
        assert optional("number?") == optional("number")
        assert optional(optional("string")) == optional("string")

    def test_union(self):
        assert union("string", "number") == UnionType(
            (Primitive.STRING, Primitive.NUMBER)
        )

    def test_literal_union(self):
        assert literal_union("a", "b") == UnionType((literal("a"), literal("b")))

    def test_extend_literal_union_copies(self):
        base = literal_union("a", "b")
        extended = extend_literal_union(base, "c")
        assert extended.options == (literal("a"), literal("b"), literal("c"))
        assert base.options == (literal("a"), literal("b"))

    def test_struct_is_read_only(self):
        source = {"a": "string"}
        spec = struct(source)
        with pytest.raises(TypeError):
            spec.fields["b"] = "number"  # type: ignore[index]
        source["b"] = "number"
        assert dict(spec.fields) == {"a": Primitive.STRING}

    def test_struct_is_hashable(self):
        spec = struct({"a": "string"})
        assert hash(spec) == hash(struct({"a": "string"}))
        assert hash(union(spec, "nil")) == hash(union(struct({"a": "string"}), "nil"))

    def test_struct_coerces_fields(self):
        assert struct({"name": "string"}) == StructType({"name": Primitive.STRING})

    def test_extend_struct_overrides(self):
        base = struct({"name": "string", "age": "number"})
        extended = extend_struct(base, {"age": optional("number"), "id": "number"})
        assert extended.fields == {
            "name": Primitive.STRING,
            "age": OptionalType(Primitive.NUMBER),
            "id": Primitive.NUMBER,
        }
        assert base.fields["age"] == Primitive.NUMBER
        assert "id" not in base.fields

    def test_table_bare(self):
        assert table() is Primitive.TABLE

    def test_table_defaults(self):
        assert table("string") == TableType(Primitive.STRING, Primitive.ANY)
        assert table(value_type="number") == TableType(Primitive.ANY, Primitive.NUMBER)

    def test_array(self):
        assert array("string") == ArrayType(Primitive.STRING)
        assert array() == ArrayType(Primitive.ANY)
