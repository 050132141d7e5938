"""
Tests for typespec.render.
"""

from typespec import (
    Base,
    ErrorRecord,
    Primitive,
    TableKey,
    TableValue,
    array,
    escape_single_quote,
    literal,
    literal_union,
    optional,
    repr_value,
    struct,
    table,
    type_error_to_string,
    type_to_description,
    union,
    where_to_description,
)


class TestWhereToDescription:
    def test_empty(self):
        assert where_to_description(()) is None

    def test_base(self):
        assert where_to_description((Base("config"),)) == "config"

    def test_base_resets(self):
        where = (Base("a"), TableValue("x"), Base("b"))
        assert where_to_description(where) == "b"

    def test_dotted_field(self):
        where = (Base("config"), TableValue("server"), TableValue("port_2"))
        assert where_to_description(where) == "config.server.port_2"

    def test_bracket_index(self):
        where = (Base("config"), TableValue("servers"), TableValue(3))
        assert where_to_description(where) == "config.servers[3]"

    def test_bracket_non_identifier(self):
        where = (Base("headers"), TableValue("content-type"))
        assert where_to_description(where) == "headers['content-type']"

    def test_trailing_newline_is_not_identifier(self):
        where = (Base("cfg"), TableValue("a\n"))
        assert where_to_description(where) == "cfg['a\n']"

    def test_bare_table_entry(self):
        assert where_to_description((TableValue("name"),)) == "table entry 'name'"
        assert where_to_description((TableValue(1),)) == "table entry 1"

    def test_table_key(self):
        assert where_to_description((TableKey("k"),)) == "key 'k'"
        where = (Base("opts"), TableValue("env"), TableKey(5))
        assert where_to_description(where) == "key 5 of opts.env"


class TestReprValue:
    def test_strings_are_quoted(self):
        assert repr_value("abc") == "'abc'"
        assert repr_value("it's") == "'it\\'s'"

    def test_other_values(self):
        assert repr_value(3) == "3"
        assert repr_value(None) == "nil"
        assert repr_value(False) == "false"

    def test_escape_single_quote(self):
        assert escape_single_quote("a'b'c") == "a\\'b\\'c"


class TestTypeToDescription:
    def test_primitive(self):
        assert type_to_description("number") == "number"
        assert type_to_description(Primitive.ANY) == "any"

    def test_literal(self):
        assert type_to_description(literal("x")) == "'x'"
        assert type_to_description(literal(3)) == "3"
        assert type_to_description(literal(True)) == "true"

    def test_optional(self):
        assert type_to_description(optional("number")) == "optional number"
        assert type_to_description("string?") == "optional string"

    def test_union(self):
        assert type_to_description(literal_union("a", "b")) == "'a' or 'b'"
        assert (
            type_to_description(union("string", optional("number")))
            == "string or optional number"
        )

    def test_tables_are_coarse(self):
        assert type_to_description(table("string", "number")) == "table"
        assert type_to_description(table()) == "table"
        assert type_to_description(struct({"a": "string"})) == "structural table"
        assert type_to_description(array("number")) == "array table"


class TestTypeErrorToString:
    def test_without_where(self):
        error = ErrorRecord(value="x", type=Primitive.NUMBER)
        assert (
            type_error_to_string(error)
            == "Unexpected value. Found: x Expected: value of type number"
        )

    def test_with_where(self):
        error = ErrorRecord(
            value=None,
            type=literal_union("left", "right"),
            where=(Base("layout"), TableValue("align")),
        )
        assert type_error_to_string(error) == (
            "Unexpected value in layout.align. Found: nil"
            " Expected: value of type 'left' or 'right'"
        )
