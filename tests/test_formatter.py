"""Tests for trace_lib.formatter — printf-style substitution."""

import pytest

from minitrace.lib.trace_lib import format_message
from minitrace.lib.trace_lib.formatter import inspect_value


class TestDirectives:
    """Substitution of each supported directive."""

    def test_no_arguments(self):
        assert format_message() == ""

    def test_integers(self):
        assert format_message("%d! = %d", 3, 6) == "3! = 6"

    def test_string(self):
        assert format_message("hello %s", "world") == "hello world"

    @pytest.mark.parametrize("value, expected", [
        (7, "7"),
        ("12", "12"),
        (3.7, "3"),
        (True, "1"),
        ("abc", "NaN"),
        (None, "NaN"),
        (float("nan"), "NaN"),
    ])
    def test_integer_conversion(self, value, expected):
        assert format_message("%d", value) == expected
        assert format_message("%i", value) == expected

    def test_float(self):
        assert format_message("%f", 2) == "2.0"
        assert format_message("%f", "x") == "NaN"

    def test_json(self):
        assert format_message("%j", {"a": [1, 2]}) == '{"a": [1, 2]}'

    def test_json_circular(self):
        data = {}
        data["self"] = data
        assert format_message("%j", data) == "[Circular]"

    def test_json_unserializable_falls_back_to_str(self):
        text = format_message("%j", {"when": object()})
        assert text.startswith('{"when": "<object object')

    def test_repr(self):
        assert format_message("%o / %O", "s", [1]) == "'s' / [1]"

    def test_percent_escape(self):
        assert format_message("100%% of %d", 3) == "100% of 3"

    def test_single_argument_unchanged(self):
        """A lone template is returned as-is, directives included."""
        assert format_message("50%% %s") == "50%% %s"


class TestFallbacks:
    """Mismatched arguments degrade, never raise."""

    def test_missing_argument_leaves_directive(self):
        assert format_message("%s and %s", "a") == "a and %s"

    def test_excess_arguments_appended(self):
        assert format_message("x", 1, "y") == "x 1 y"

    def test_unknown_directive_kept(self):
        assert format_message("%q", 1) == "%q 1"

    def test_non_string_template(self):
        assert format_message(1, 2, None) == "1 2 None"

    def test_exception_rendering(self):
        assert format_message(ValueError("bad")) == "ValueError: bad"
        assert format_message("%s", KeyError()) == "KeyError"

    def test_unprintable_object(self):
        class Unprintable:
            def __str__(self):
                raise RuntimeError("no")

            def __repr__(self):
                raise RuntimeError("no")

        text = format_message("%s|%o", Unprintable(), Unprintable())
        left, right = text.split("|")
        assert left.startswith("<") and "Unprintable" in left
        assert right.startswith("<") and "Unprintable" in right

    def test_inspect_value(self):
        assert inspect_value("s") == "s"
        assert inspect_value(3) == "3"
        assert inspect_value([1, "a"]) == "[1, 'a']"

    def test_json_non_string_keys_fall_back_to_str(self):
        assert format_message("%j", {(1, 2): 3}) == "{(1, 2): 3}"

    def test_json_non_string_keys_through_manager(self, tr, out_buf):
        tr.log("state %j", {(1, 2): 3})
        tr.flush()
        assert out_buf.getvalue().splitlines()[-1] == "state {(1, 2): 3}"

    def test_numeric_conversion_errors_become_nan(self):
        class BadNumber:
            def __int__(self):
                raise RuntimeError("no int")

            def __float__(self):
                raise RuntimeError("no float")

        assert format_message("%d|%i|%f", BadNumber(), BadNumber(), BadNumber()) == "NaN|NaN|NaN"
