"""
Tests for the predicate library.

Predicates are called directly with the full (value, params, all_values,
field_name) contract.
"""
import math
import re
from datetime import date, datetime
from zoneinfo import available_timezones

import pytest

from valida_lib import predicates
from valida_lib.predicates import DEFAULT_RULES, as_text, is_blank, is_empty, parse_date, to_number


def check(rule, value, params=(), all_values=None, field_name="field"):
    """Run a rule from the default catalog."""
    return DEFAULT_RULES[rule](value, list(params), all_values or {}, field_name)


class TestPrimitives:
    """Test the shared emptiness and coercion helpers."""

    @pytest.mark.parametrize("value", [None, False, "", 0, 0.0, math.nan])
    def test_is_empty_true(self, value):
        """Test falsy values are skipped."""
        assert is_empty(value) is True

    @pytest.mark.parametrize("value", [" ", "x", 1, True, [], {}, date(2024, 1, 1)])
    def test_is_empty_false(self, value):
        """Test that whitespace and empty lists still reach the rule."""
        assert is_empty(value) is False

    @pytest.mark.parametrize("value", [None, "", "   ", [], (), set()])
    def test_is_blank_true(self, value):
        assert is_blank(value) is True

    @pytest.mark.parametrize("value", ["x", 0, False, [1], {}])
    def test_is_blank_false(self, value):
        assert is_blank(value) is False

    def test_to_number(self):
        """Test lenient numeric coercion."""
        assert to_number("12") == 12.0
        assert to_number(" 1.5 ") == 1.5
        assert to_number("") == 0.0
        assert to_number(True) == 1.0
        assert to_number(7) == 7.0
        assert to_number("abc") is None
        assert to_number("1_000") is None
        assert to_number("nan") is None
        assert to_number(None) is None
        assert to_number([1]) is None

    def test_as_text(self):
        """Test form-style stringification."""
        assert as_text(None) == ""
        assert as_text(True) == "true"
        assert as_text(2.0) == "2"
        assert as_text(2.5) == "2.5"
        assert as_text(["a", 1]) == "a,1"

    def test_parse_date(self):
        """Test the supported date inputs."""
        assert parse_date("2024-01-15") == datetime(2024, 1, 15)
        assert parse_date("2024-01-15T10:30:00Z") == datetime(2024, 1, 15, 10, 30)
        assert parse_date("2024-01-15T12:30:00+02:00") == datetime(2024, 1, 15, 10, 30)
        assert parse_date("01/15/2024") == datetime(2024, 1, 15)
        assert parse_date(date(2024, 1, 15)) == datetime(2024, 1, 15)
        assert parse_date(86_400_000) == datetime(1970, 1, 2)
        assert parse_date("not a date") is None
        assert parse_date(None) is None


class TestRequired:
    """required treats only None and string/sequence emptiness as missing."""

    @pytest.mark.parametrize("value", ["", None, [], "   "])
    def test_fails_on_blank(self, value):
        assert check("required", value) is False

    @pytest.mark.parametrize("value", ["x", 0, False, [1]])
    def test_passes_on_present(self, value):
        """Test that 0 and False count as present."""
        assert check("required", value) is True

    def test_asymmetry_with_min(self):
        """Test that 0 satisfies required but is skipped by min."""
        assert check("required", 0) is True
        assert check("min", 0, ["5"]) is True


class TestSizeRules:
    """Test min, max, size and between."""

    def test_min_string_length(self):
        assert check("min", "abcdefgh", ["8"]) is True
        assert check("min", "abc", ["8"]) is False

    def test_min_number(self):
        assert check("min", 10, ["5"]) is True
        assert check("min", 3, ["5"]) is False

    def test_min_list_length(self):
        """Test that an empty list is not skipped."""
        assert check("min", [], ["1"]) is False
        assert check("min", [1, 2], ["1"]) is True

    def test_min_empty_skipped(self):
        assert check("min", "", ["8"]) is True
        assert check("min", None, ["8"]) is True

    def test_max(self):
        assert check("max", "abc", ["3"]) is True
        assert check("max", "abcd", ["3"]) is False
        assert check("max", 11, ["10"]) is False

    def test_size(self):
        assert check("size", "abc", ["3"]) is True
        assert check("size", 4, ["3"]) is False

    @pytest.mark.parametrize("value,expected", [(17, False), (18, True), (100, True), (101, False)])
    def test_between_inclusive(self, value, expected):
        assert check("between", value, ["18", "100"]) is expected

    def test_between_numeric_string(self):
        """Test numeric strings compare as numbers."""
        assert check("between", "50", ["18", "100"]) is True
        assert check("between", "17", ["18", "100"]) is False

    def test_between_non_numeric_string_uses_length(self):
        assert check("between", "abc", ["2", "4"]) is True
        assert check("between", "abcdef", ["2", "4"]) is False

    def test_between_bad_params(self):
        """Test that non-numeric bounds fail without raising."""
        assert check("between", 5, ["a", "b"]) is False


class TestNumericRules:
    """Numeric coercion never raises on non-numeric strings."""

    def test_numeric(self):
        assert check("numeric", "12.5") is True
        assert check("numeric", 12) is True
        assert check("numeric", "abc") is False
        assert check("numeric", "12abc") is False
        assert check("numeric", "inf") is False
        assert check("numeric", " ") is False

    def test_integer(self):
        assert check("integer", "12") is True
        assert check("integer", "12.0") is True
        assert check("integer", "12.5") is False
        assert check("integer", "abc") is False

    def test_digits(self):
        assert check("digits", "1234", ["4"]) is True
        assert check("digits", "123", ["4"]) is False
        assert check("digits", "12a4", ["4"]) is False

    def test_digits_between(self):
        assert check("digits_between", "123", ["2", "4"]) is True
        assert check("digits_between", "12345", ["2", "4"]) is False

    def test_max_min_digits(self):
        assert check("max_digits", "12-34", ["4"]) is True
        assert check("max_digits", "12345", ["4"]) is False
        assert check("min_digits", "1a2", ["2"]) is True
        assert check("min_digits", "1", ["2"]) is False

    def test_decimal_exact(self):
        assert check("decimal", "1.25", ["2"]) is True
        assert check("decimal", "1.2", ["2"]) is False

    def test_decimal_range(self):
        assert check("decimal", "1.2", ["1", "3"]) is True
        assert check("decimal", "1.2345", ["1", "3"]) is False

    def test_decimal_whole_number(self):
        assert check("decimal", "5", ["0"]) is True
        assert check("decimal", "5", ["2"]) is False

    def test_decimal_non_numeric(self):
        assert check("decimal", "abc", ["2"]) is False

    def test_multiple_of(self):
        assert check("multiple_of", "15", ["5"]) is True
        assert check("multiple_of", "16", ["5"]) is False
        assert check("multiple_of", "abc", ["5"]) is False
        assert check("multiple_of", "10", ["0"]) is False


class TestStringRules:
    """Test character-class and affix rules."""

    def test_email(self):
        assert check("email", "user@example.com") is True
        assert check("email", "not-an-email") is False
        assert check("email", "a b@example.com") is False

    def test_alpha_family(self):
        assert check("alpha", "abc") is True
        assert check("alpha", "abc1") is False
        assert check("alpha_num", "abc1") is True
        assert check("alpha_num", "abc-1") is False
        assert check("alpha_dash", "abc-1_x") is True
        assert check("alpha_dash", "abc 1") is False

    def test_case(self):
        assert check("lowercase", "abc") is True
        assert check("lowercase", "aBc") is False
        assert check("uppercase", "ABC") is True
        assert check("uppercase", "ABc") is False

    def test_ascii(self):
        assert check("ascii", "hello!") is True
        assert check("ascii", "héllo") is False

    def test_starts_and_ends_with(self):
        assert check("starts_with", "foobar", ["baz", "foo"]) is True
        assert check("starts_with", "foobar", ["bar"]) is False
        assert check("ends_with", "foobar", ["bar"]) is True
        assert check("doesnt_start_with", "foobar", ["foo"]) is False
        assert check("doesnt_end_with", "foobar", ["foo"]) is True

    def test_regex(self):
        assert check("regex", "AB12", ["^[A-Z]{2}[0-9]{2}$"]) is True
        assert check("regex", "ab12", ["^[A-Z]{2}[0-9]{2}$"]) is False

    def test_regex_with_comma_quantifier(self):
        """Test that commas split out of the pattern are restored."""
        assert check("regex", "123", ["^[0-9]{2", "4}$"]) is True

    def test_not_regex(self):
        assert check("not_regex", "abc", ["[0-9]"]) is True
        assert check("not_regex", "abc1", ["[0-9]"]) is False

    def test_malformed_regex_raises(self):
        """Test that a bad pattern is a programmer error, not a False."""
        with pytest.raises(re.error):
            check("regex", "abc", ["[unclosed"])

    def test_password(self):
        assert check("password", "Passw0rd!") is True
        assert check("password", "password") is False
        assert check("password", "Pw0!", ["8"]) is False
        assert check("password", "Pw0!abcd", ["8"]) is True


class TestFormatRules:
    """Test URL, network and identifier formats."""

    def test_url(self):
        assert check("url", "https://example.com/path") is True
        assert check("url", "mailto:someone@example.com") is True
        assert check("url", "https://") is False
        assert check("url", "not a url") is False

    def test_active_url(self):
        assert check("active_url", "http://example.com") is True
        assert check("active_url", "ftp://example.com") is False

    def test_ip(self):
        assert check("ip", "192.168.0.1") is True
        assert check("ip", "::1") is True
        assert check("ip", "999.1.1.1") is False

    def test_ipv4_ipv6(self):
        assert check("ipv4", "10.0.0.1") is True
        assert check("ipv4", "::1") is False
        assert check("ipv6", "2001:db8::1") is True
        assert check("ipv6", "10.0.0.1") is False

    def test_uuid(self):
        assert check("uuid", "123e4567-e89b-12d3-a456-426614174000") is True
        assert check("uuid", "not-a-uuid") is False

    def test_ulid(self):
        assert check("ulid", "01ARZ3NDEKTSV4RRFFQ69G5FAV") is True
        assert check("ulid", "81ARZ3NDEKTSV4RRFFQ69G5FAV") is False

    def test_mac_address(self):
        assert check("mac_address", "00:1A:2B:3C:4D:5E") is True
        assert check("mac_address", "00:1A:2B:3C:4D") is False

    def test_hex_color(self):
        assert check("hex_color", "#fff") is True
        assert check("hex_color", "a1b2c3") is True
        assert check("hex_color", "#ggg") is False

    def test_json(self):
        assert check("json", '{"a": 1}') is True
        assert check("json", "{a: 1}") is False

    @pytest.mark.skipif(not available_timezones(), reason="no tz database")
    def test_timezone(self):
        assert check("timezone", "UTC") is True

    def test_unknown_timezone(self):
        assert check("timezone", "Not/AZone") is False


class TestDateRules:
    """Test date parsing and comparison rules."""

    def test_date(self):
        assert check("date", "2024-02-29") is True
        assert check("date", "2023-02-29") is False
        assert check("date", "yesterday-ish") is False

    def test_before_after(self):
        assert check("before", "2024-01-01", ["2024-06-01"]) is True
        assert check("before", "2024-06-01", ["2024-06-01"]) is False
        assert check("after", "2024-07-01", ["2024-06-01"]) is True
        assert check("before_or_equal", "2024-06-01", ["2024-06-01"]) is True
        assert check("after_or_equal", "2024-05-31", ["2024-06-01"]) is False

    def test_invalid_comparison_date(self):
        assert check("before", "2024-01-01", ["whenever"]) is False

    def test_date_equals(self):
        assert check("date_equals", "2024-06-01T15:00:00", ["2024-06-01"]) is True
        assert check("date_equals", "2024-06-02", ["2024-06-01"]) is False

    def test_date_format(self):
        assert check("date_format", "2024-06-01", ["Y-m-d"]) is True
        assert check("date_format", "01/06/2024", ["Y-m-d"]) is False
        assert check("date_format", "01/06/2024", ["d/m/Y"]) is True
        assert check("date_format", "14:30", ["H:i"]) is True


class TestChoiceRules:
    """Test in/not_in, booleans and acceptance."""

    def test_in(self):
        assert check("in", "red", ["red", "green"]) is True
        assert check("in", "blue", ["red", "green"]) is False
        assert check("in", 1, ["1", "2"]) is True

    def test_not_in(self):
        assert check("not_in", "blue", ["red"]) is True
        assert check("not_in", "red", ["red"]) is False

    def test_boolean(self):
        for value in [True, False, 1, 0, "1", "0", "true", "false", None]:
            assert check("boolean", value) is True
        assert check("boolean", "yes") is False

    def test_accepted(self):
        for value in ["yes", "on", "1", 1, True, "true"]:
            assert check("accepted", value) is True
        for value in ["no", None, False, ""]:
            assert check("accepted", value) is False

    def test_declined(self):
        for value in ["no", "off", "0", 0, False, "false"]:
            assert check("declined", value) is True
        assert check("declined", "yes") is False

    def test_accepted_if(self):
        values = {"plan": "paid"}
        assert check("accepted_if", "no", ["plan", "paid"], values) is False
        assert check("accepted_if", "yes", ["plan", "paid"], values) is True
        assert check("accepted_if", "no", ["plan", "free"], values) is True

    def test_declined_if(self):
        values = {"minor": "true"}
        assert check("declined_if", "yes", ["minor", "true"], values) is False
        assert check("declined_if", "no", ["minor", "true"], values) is True

    def test_distinct(self):
        assert check("distinct", [1, 2, 3]) is True
        assert check("distinct", [1, 2, 1]) is False
        assert check("distinct", "not a list") is True

    def test_distinct_keeps_types_apart(self):
        """Test that 1 and True, or 0 and False, are different items."""
        assert check("distinct", [1, True]) is True
        assert check("distinct", [0, False]) is True
        assert check("distinct", [1, 1.0]) is False
        assert check("distinct", ["1", 1]) is True


class TestTypeRules:
    """Test string, array, present, filled, prohibited, nullable."""

    def test_string(self):
        assert check("string", "x") is True
        assert check("string", 1) is False
        assert check("string", None) is True

    def test_array(self):
        assert check("array", [1]) is True
        assert check("array", "x") is False

    def test_present(self):
        assert check("present", None, all_values={"field": None}) is True
        assert check("present", None, all_values={}) is False
        assert check("present", "x") is True

    def test_filled(self):
        assert check("filled", None) is True
        assert check("filled", "  ") is False
        assert check("filled", "x") is True

    def test_prohibited(self):
        assert check("prohibited", None) is True
        assert check("prohibited", "") is True
        assert check("prohibited", "x") is False
        assert check("prohibited", 0) is False

    def test_nullable(self):
        assert check("nullable", "anything") is True


class TestCrossFieldRules:
    """Cross-field rules read the value set and tolerate missing fields."""

    def test_same(self):
        values = {"password": "abc", "password_confirmation": "abc"}
        assert check("same", "abc", ["password"], values) is True
        assert check("same", "xyz", ["password"], values) is False

    def test_same_is_strict(self):
        """Test that 1 and "1" do not match."""
        assert check("same", "1", ["other"], {"other": 1}) is False

    def test_different(self):
        assert check("different", "a", ["other"], {"other": "b"}) is True
        assert check("different", "a", ["other"], {"other": "a"}) is False

    def test_confirmed(self):
        values = {"password": "abc", "password_confirmation": "abc"}
        assert check("confirmed", "abc", [], values, "password") is True
        assert check("confirmed", "abc", [], {}, "password") is False

    def test_comparisons(self):
        values = {"low": "10"}
        assert check("gt", "11", ["low"], values) is True
        assert check("gt", "10", ["low"], values) is False
        assert check("gte", "10", ["low"], values) is True
        assert check("lt", "9", ["low"], values) is True
        assert check("lte", "11", ["low"], values) is False

    @pytest.mark.parametrize("rule", ["gt", "gte", "lt", "lte"])
    def test_comparison_missing_field_passes(self, rule):
        assert check(rule, "5", ["absent"], {}) is True

    def test_comparison_non_numeric(self):
        assert check("gt", "abc", ["low"], {"low": "1"}) is False

    def test_required_if(self):
        assert check("required_if", "", ["role", "admin"], {"role": "admin"}) is False
        assert check("required_if", "", ["role", "admin"], {"role": "user"}) is True
        assert check("required_if", "", ["role", "admin"], {}) is True

    def test_required_unless(self):
        assert check("required_unless", "", ["role", "guest", "bot"], {"role": "user"}) is False
        assert check("required_unless", "", ["role", "guest", "bot"], {"role": "bot"}) is True

    def test_required_with(self):
        assert check("required_with", "", ["a", "b"], {"a": "x"}) is False
        assert check("required_with", "", ["a", "b"], {"a": ""}) is True

    def test_required_with_all(self):
        assert check("required_with_all", "", ["a", "b"], {"a": "x"}) is True
        assert check("required_with_all", "", ["a", "b"], {"a": "x", "b": "y"}) is False

    def test_required_without(self):
        assert check("required_without", "", ["a", "b"], {"a": "x"}) is False
        assert check("required_without", "", ["a", "b"], {"a": "x", "b": "y"}) is True

    def test_required_without_all(self):
        assert check("required_without_all", "", ["a", "b"], {}) is False
        assert check("required_without_all", "", ["a", "b"], {"b": "y"}) is True


class TestCatalog:
    """Test the DEFAULT_RULES mapping itself."""

    def test_reserved_names_mapped(self):
        """Test rules whose names clash with Python names."""
        assert DEFAULT_RULES["in"] is predicates.in_
        assert DEFAULT_RULES["min"] is predicates.min_
        assert DEFAULT_RULES["json"] is predicates.json_

    def test_every_rule_callable(self):
        assert all(callable(predicate) for predicate in DEFAULT_RULES.values())

    def test_empty_short_circuit(self):
        """Test that value-format rules skip empty values."""
        for rule in ["email", "url", "numeric", "alpha", "date", "uuid", "ip", "json", "regex"]:
            assert check(rule, "", ["x"]) is True, rule
