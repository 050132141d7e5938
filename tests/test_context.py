"""
Tests for typespec.context.
"""

from typespec import checking_context, get_type_errors, struct
from typespec.context import default_max_depth

NESTED = struct({"a": struct({"b": "string"})})
VALUE = {"a": {"b": 1}}


class TestCheckingContext:
    def test_default_unbounded(self):
        assert default_max_depth() is None
        assert len(get_type_errors(VALUE, NESTED)) == 1

    def test_sets_default_depth(self):
        with checking_context(max_depth=1):
            assert default_max_depth() == 1
            assert get_type_errors(VALUE, NESTED) == []
        assert default_max_depth() is None

    def test_explicit_max_depth_wins(self):
        with checking_context(max_depth=1):
            assert len(get_type_errors(VALUE, NESTED, max_depth=5)) == 1

    def test_nested_contexts(self):
        with checking_context(max_depth=0):
            with checking_context(max_depth=2):
                assert default_max_depth() == 2
            assert default_max_depth() == 0
