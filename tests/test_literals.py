"""Tests for literal coercion."""

import math
from datetime import date, datetime, time, timedelta, timezone

import pytest

from solid_inbox_agent import vocab
from solid_inbox_agent.literals import coerce, term_value
from solid_inbox_agent.models import Identifier, Literal


class TestCoerce:
    """Datatype mapping."""

    @pytest.mark.parametrize("datatype", [vocab.XSD_INTEGER, vocab.XSD_NON_NEGATIVE_INTEGER])
    def test_integers(self, datatype):
        assert coerce("42", datatype) == 42

    def test_bad_integer_is_nan(self):
        assert math.isnan(coerce("forty-two", vocab.XSD_INTEGER))

    def test_decimal(self):
        assert coerce("3.25", vocab.XSD_DECIMAL) == pytest.approx(3.25)

    def test_bad_decimal_is_nan(self):
        assert math.isnan(coerce("", vocab.XSD_DECIMAL))

    @pytest.mark.parametrize("text,expected", [
        ("true", True), ("1", True), ("false", False), ("0", False), ("TRUE", True),
    ])
    def test_boolean(self, text, expected):
        assert coerce(text, vocab.XSD_BOOLEAN) is expected

    def test_datetime_with_z(self):
        value = coerce("2024-03-01T10:15:00Z", vocab.XSD_DATETIME)
        assert value == datetime(2024, 3, 1, 10, 15, tzinfo=timezone.utc)

    def test_datetime_with_offset(self):
        value = coerce("2024-03-01T12:15:00+02:00", vocab.XSD_DATETIME)
        assert value.utcoffset() == timedelta(hours=2)

    def test_date(self):
        assert coerce("2024-03-01", vocab.XSD_DATE) == date(2024, 3, 1)

    def test_time(self):
        assert coerce("10:15:00", vocab.XSD_TIME) == time(10, 15)

    def test_bad_datetime_returns_text(self):
        assert coerce("yesterday", vocab.XSD_DATETIME) == "yesterday"

    def test_string_and_unknown_datatypes_pass_through(self):
        assert coerce("hello", vocab.XSD_STRING) == "hello"
        assert coerce("hello", "http://example.org/custom") == "hello"
        assert coerce("hello", None) == "hello"

    @pytest.mark.parametrize("value,datatype", [
        (42, vocab.XSD_INTEGER),
        (True, vocab.XSD_BOOLEAN),
        (datetime(2024, 1, 1), vocab.XSD_DATETIME),
        (1.5, vocab.XSD_DECIMAL),
    ])
    def test_native_values_are_returned_unchanged(self, value, datatype):
        assert coerce(value, datatype) is value

    def test_coercing_twice_gives_the_same_value(self):
        once = coerce("2024-03-01T10:15:00Z", vocab.XSD_DATETIME)
        assert coerce(once, vocab.XSD_DATETIME) == once


class TestTermValue:
    def test_identifier_gives_uri(self):
        assert term_value(Identifier("https://app.example/icon.png")) == "https://app.example/icon.png"

    def test_literal_is_coerced(self):
        assert term_value(Literal("7", vocab.XSD_INTEGER)) == 7


class TestNumericLexicalForms:
    """Only XSD lexical forms are read as numbers."""

    @pytest.mark.parametrize("text", ["1_000", "inf", "nan", "0x10", "1.5", "4 2"])
    def test_non_xsd_integers_are_nan(self, text):
        assert math.isnan(coerce(text, vocab.XSD_INTEGER))

    @pytest.mark.parametrize("text", ["1_000.5", "inf", "-Infinity", "nan", "1e5"])
    def test_non_xsd_decimals_are_nan(self, text):
        assert math.isnan(coerce(text, vocab.XSD_DECIMAL))

    @pytest.mark.parametrize("text,expected", [("+7", 7), ("-7", -7), (" 12 ", 12), ("007", 7)])
    def test_xsd_integers(self, text, expected):
        assert coerce(text, vocab.XSD_INTEGER) == expected

    @pytest.mark.parametrize("text,expected", [(".5", 0.5), ("-1.", -1.0), ("+2.25", 2.25), ("3", 3.0)])
    def test_xsd_decimals(self, text, expected):
        assert coerce(text, vocab.XSD_DECIMAL) == pytest.approx(expected)
