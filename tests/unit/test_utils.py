"""Unit tests for foundation utilities.

Tests value coercion helpers, deep difference, and logging setup.
"""

import logging
import math

import pytest

pytestmark = pytest.mark.unit


class TestCoerceNumber:
    """Test coerce_number."""

    @pytest.mark.parametrize("value", [0, 3, -2.5, 1e300])
    def test_Should_ReturnValue_When_FiniteNumber(self, value):
        """Finite ints and floats pass through unchanged."""
        from geotemporal.utils import coerce_number

        assert coerce_number(value, "fallback") == value

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, "3", None, True, [1]])
    def test_Should_ReturnFallback_When_NotFiniteNumber(self, value):
        """NaN, infinities, strings, and booleans fall back."""
        from geotemporal.utils import coerce_number

        assert coerce_number(value, "fallback") == "fallback"

    def test_Should_ReturnNone_When_NoFallbackGiven(self):
        """The default fallback is None."""
        from geotemporal.utils import coerce_number

        assert coerce_number("x") is None


class TestParseIntPrefix:
    """Test parse_int_prefix."""

    @pytest.mark.parametrize(
        "text, expected",
        [("12", 12), ("12px", 12), ("  7", 7), ("-3", -3), ("+5", 5), ("007", 7), ("1.9", 1)],
    )
    def test_Should_ParseLeadingDigits_When_Present(self, text, expected):
        """Leading whitespace and sign are accepted; trailing text is ignored."""
        from geotemporal.utils import parse_int_prefix

        assert parse_int_prefix(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "-", "px12", None, 12])
    def test_Should_ReturnNone_When_NoLeadingDigits(self, text):
        """Nothing to parse yields None."""
        from geotemporal.utils import parse_int_prefix

        assert parse_int_prefix(text) is None

    @pytest.mark.parametrize("text", ["\u0662\u0660\u0662\u0660", "\uff11\uff12", " \u0967"])
    def test_Should_ReturnNone_When_DigitsNotAscii(self, text):
        """Only ASCII digits count; other Unicode decimal digits do not parse."""
        from geotemporal.utils import parse_int_prefix

        assert parse_int_prefix(text) is None


class TestClampInteger:
    """Test clamp_integer."""

    @pytest.mark.parametrize(
        "value, expected",
        [(5, 5), ("5", 5), ("15", 10), (-5, 1), ("abc", 1), (None, 1), (3.9, 3), ("7 items", 7), (True, 1)],
    )
    def test_Should_ClampIntoRange_When_ValueGiven(self, value, expected):
        """Values are parsed as integers and clamped into [1, 10]."""
        from geotemporal.utils import clamp_integer

        assert clamp_integer(value, 1, 10) == expected

    def test_Should_IncludeBounds_When_ValueOnEdge(self):
        """Both bounds are inclusive."""
        from geotemporal.utils import clamp_integer

        assert clamp_integer(1, 1, 10) == 1
        assert clamp_integer(10, 1, 10) == 10

    def test_Should_UseMinimum_When_DigitsNotAscii(self):
        """Non-ASCII digits are unparseable, so the minimum applies."""
        from geotemporal.utils import clamp_integer

        assert clamp_integer("\u0665", 0, 10) == 0
        assert clamp_integer("\uff17", 2, 10) == 2


class TestDeepDifference:
    """Test deep_difference."""

    def test_Should_ReportOnlyDifferingSubKeys_When_NestedMappingsDiffer(self):
        """Nested mappings recurse; equal keys are omitted."""
        from geotemporal.utils import deep_difference

        result = deep_difference({"a": 1, "b": {"c": 2, "d": 3}}, {"a": 1, "b": {"c": 2, "d": 4}})

        assert result == {"b": {"d": 3}}

    def test_Should_ReturnEmpty_When_StructuresEqual(self):
        """Identical structures have no difference."""
        from geotemporal.utils import deep_difference

        assert deep_difference({"a": [1, {"b": 2}]}, {"a": [1, {"b": 2}]}) == {}

    def test_Should_ReportFullValue_When_OnlyOneSideNested(self):
        """A mapping compared with a scalar is reported whole."""
        from geotemporal.utils import deep_difference

        assert deep_difference({"a": {"x": 1}}, {"a": 5}) == {"a": {"x": 1}}
        assert deep_difference({"a": 5}, {"a": {"x": 1}}) == {"a": 5}

    def test_Should_ReportKey_When_MissingFromBase(self):
        """Keys absent from base always differ, even with a None value."""
        from geotemporal.utils import deep_difference

        assert deep_difference({"a": None, "b": 1}, {"b": 1}) == {"a": None}

    def test_Should_IgnoreKeysOnlyInBase_When_Comparing(self):
        """Keys only present in base are not reported."""
        from geotemporal.utils import deep_difference

        assert deep_difference({"a": 1}, {"a": 1, "z": 2}) == {}

    def test_Should_KeyListEntriesByIndex_When_ListsDiffer(self):
        """List differences are reported by index."""
        from geotemporal.utils import deep_difference

        assert deep_difference({"l": [1, 2, 3]}, {"l": [1, 5, 3]}) == {"l": {1: 2}}
        assert deep_difference({"l": [1, 2]}, {"l": [1]}) == {"l": {1: 2}}

    def test_Should_ReportEverything_When_BaseNotAContainer(self):
        """A scalar base shares no keys."""
        from geotemporal.utils import deep_difference

        assert deep_difference({"a": 1}, None) == {"a": 1}

    def test_Should_ReportBoolean_When_BaseHoldsEqualNumber(self):
        """True and 1 are different values, at any depth."""
        from geotemporal.utils import deep_difference

        assert deep_difference({"a": True}, {"a": 1}) == {"a": True}
        assert deep_difference({"a": 0}, {"a": False}) == {"a": 0}
        assert deep_difference({"l": [True]}, {"l": [1]}) == {"l": {0: True}}
        assert deep_difference({"m": {"n": [1, False]}}, {"m": {"n": [1, 0]}}) == {"m": {"n": {1: False}}}

    def test_Should_TreatIntAndFloatAsEqual_When_SameNumber(self):
        """Numeric equality still spans int and float."""
        from geotemporal.utils import deep_difference

        assert deep_difference({"a": 1, "b": {"c": [2]}}, {"a": 1.0, "b": {"c": [2.0]}}) == {}


class TestCoerceStringsToNumbers:
    """Test coerce_strings_to_numbers."""

    def test_Should_ConvertNumericStrings_When_Nested(self):
        """Numeric strings become floats at any depth."""
        from geotemporal.utils import coerce_strings_to_numbers

        result = coerce_strings_to_numbers({"a": "1.5", "b": ["2", "x"], "c": None, "d": {"e": "-3"}})

        assert result == {"a": 1.5, "b": [2.0, "x"], "c": None, "d": {"e": -3.0}}
        assert isinstance(result["b"][0], float)

    @pytest.mark.parametrize("text, expected", [("1e3", 1000.0), (" 42 ", 42.0), (".5", 0.5), ("7.", 7.0)])
    def test_Should_ParseDecimalForms_When_FullyNumeric(self, text, expected):
        """Exponents, surrounding whitespace, and bare fractions are numeric."""
        from geotemporal.utils import coerce_strings_to_numbers

        assert coerce_strings_to_numbers(text) == expected

    @pytest.mark.parametrize("text", ["", " ", "12px", "0x10", "nan", "inf", "1,000"])
    def test_Should_KeepString_When_NotFullyNumeric(self, text):
        """Partial, hexadecimal, and special-value strings are left alone."""
        from geotemporal.utils import coerce_strings_to_numbers

        assert coerce_strings_to_numbers(text) == text

    @pytest.mark.parametrize("text", ["\u0663", "\u0661.\u0665", "\uff14\uff12"])
    def test_Should_KeepString_When_DigitsNotAscii(self, text):
        """Unicode decimal digits outside ASCII are not numeric literals."""
        from geotemporal.utils import coerce_strings_to_numbers

        assert coerce_strings_to_numbers(text) == text

    def test_Should_PassOtherTypes_When_NotStringOrContainer(self):
        """Numbers, None, and booleans pass through."""
        from geotemporal.utils import coerce_strings_to_numbers

        assert coerce_strings_to_numbers(3) == 3
        assert coerce_strings_to_numbers(None) is None
        assert coerce_strings_to_numbers(True) is True

    def test_Should_ApplyPostProcessAtEveryLevel_When_Recursing(self):
        """post_process sees every node, children first, top level last."""
        from geotemporal.utils import coerce_strings_to_numbers

        seen = []

        def record(value):
            seen.append(value)
            return value

        coerce_strings_to_numbers(["1", ["2"]], record)

        assert seen == [1.0, 2.0, [2.0], [1.0, [2.0]]]

    def test_Should_UsePostProcessResult_When_Returning(self):
        """Whatever post_process returns is the result."""
        from geotemporal.utils import coerce_strings_to_numbers

        def wrap(value):
            return ("seen", value)

        assert coerce_strings_to_numbers("1", wrap) == ("seen", 1.0)
        assert coerce_strings_to_numbers({"a": "2"}, wrap) == ("seen", {"a": ("seen", 2.0)})

    def test_Should_NotModifyInput_When_Converting(self):
        """A new structure is built; the input stays as it was."""
        from geotemporal.utils import coerce_strings_to_numbers

        data = {"a": ["1"]}
        coerce_strings_to_numbers(data)

        assert data == {"a": ["1"]}


class TestLoggingConfig:
    """Test logging configuration."""

    def test_Should_SetRootLevel_When_Configured(self, restore_root_logger):
        """Root logger level and handler follow the requested level."""
        from geotemporal.utils import configure_logging

        configure_logging("debug")

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1

    def test_Should_UseJsonFormat_When_Structured(self, restore_root_logger):
        """Structured logging uses a JSON-style line format."""
        from geotemporal.utils import configure_logging

        configure_logging("INFO", structured=True)

        formatter = restore_root_logger.handlers[0].formatter
        assert '"level"' in formatter._fmt

    def test_Should_RaiseValueError_When_LevelUnknown(self, restore_root_logger):
        """Unknown level names are rejected."""
        from geotemporal.utils import configure_logging

        with pytest.raises(ValueError):
            configure_logging("LOUD")
