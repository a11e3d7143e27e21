"""Tests for the value codec service."""

from decimal import Decimal

import pytest
from domain.services import ValueCodec
from domain.services.value_codec import (
    decode_number,
    encode_default,
    format_description,
    is_hex_coded,
    parse_decimal,
    read_number,
)
from domain.value_objects import ValidationErrorKind


class TestParseDecimal:
    """Tests for plain decimal parsing."""

    @pytest.mark.parametrize(
        "text,expected",
        [("55", Decimal("55")), ("-3", Decimal("-3")), ("22.5", Decimal("22.5")), (".5", Decimal("0.5"))],
    )
    def test_valid_numbers(self, text: str, expected: Decimal) -> None:
        """Test that plain decimals are parsed."""
        assert parse_decimal(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "1e3", "nan", "inf", "1,5", " 5"])
    def test_rejected_numbers(self, text: str) -> None:
        """Test that exponents, special values and garbage are rejected."""
        assert parse_decimal(text) is None


class TestReadNumber:
    """Tests for reading numeric settings out of a configuration."""

    def test_decimal_and_hex_values(self, catalog) -> None:
        """Test that each setting is read with its own wire format."""
        values = {"1-02": "60", "8-02": "0A"}
        assert read_number(values, catalog, "1-02") == 60.0
        assert read_number(values, catalog, "8-02") == 10.0

    @pytest.mark.parametrize("text", ["nan", "inf", "1e1", " 60", "60 "])
    def test_malformed_values_read_as_absent(self, catalog, text: str) -> None:
        """Test that text float() would accept is not treated as a number."""
        assert read_number({"1-02": text}, catalog, "1-02") is None

    def test_missing_unknown_and_non_numeric(self, catalog) -> None:
        """Test that absent codes, unknown codes and times read as None."""
        values = {"2-02": "02:30", "Z-99": "5"}
        assert read_number(values, catalog, "1-02") is None
        assert read_number(values, catalog, "Z-99") is None
        assert read_number(values, catalog, "2-02") is None


class TestWireFormats:
    """Tests for per-type wire format detection and decoding."""

    def test_hex_coded_settings(self, catalog) -> None:
        """Test which settings use the hexadecimal wire format."""
        assert is_hex_coded(catalog["8-02"]) is True
        assert is_hex_coded(catalog["1-02"]) is False
        assert is_hex_coded(catalog["4-05"]) is False
        assert is_hex_coded(catalog["F-0D"]) is False
        assert is_hex_coded(catalog["8-0B"]) is False

    def test_decode_hex_value(self, catalog) -> None:
        """Test that hex-coded values are read as base 16."""
        assert decode_number("0A", catalog["8-02"]) == 10
        assert decode_number("0a", catalog["8-02"]) == 10
        assert decode_number("10.5", catalog["8-02"]) is None

    def test_decode_decimal_value(self, catalog) -> None:
        """Test that temperatures are read as decimals."""
        assert decode_number("10", catalog["1-02"]) == 10

    def test_format_descriptions(self, catalog) -> None:
        """Test the expected format shown to the user."""
        assert format_description(catalog["1-02"]) == "Decimal number between -40 and 90"
        assert format_description(catalog["2-02"]) == "HH:MM format"
        assert format_description(catalog["8-0B"]) == "0 or 1"
        assert format_description(catalog["F-0D"]) == "One of: 0, 1, 2"
        assert format_description(catalog["4-05"]) == "Percentage between 0 and 100"
        assert format_description(catalog["8-02"]) == "2-digit hexadecimal"

    def test_encode_defaults(self, catalog) -> None:
        """Test encoding factory defaults as wire values."""
        assert encode_default(catalog["1-02"]) == "45"
        assert encode_default(catalog["8-02"]) == "02"
        assert encode_default(catalog["8-0B"]) == "0"
        assert encode_default(catalog["F-0D"]) == "0"
        assert encode_default(catalog["2-02"]) is None


class TestValueCodec:
    """Tests for ValueCodec format checks."""

    @pytest.mark.parametrize(
        "code,value",
        [
            ("1-02", "55"),
            ("1-02", "55.5"),
            ("1-00", "-40"),
            ("2-02", "02:30"),
            ("2-02", "23:59"),
            ("8-0B", "1"),
            ("F-0D", "2"),
            ("4-05", "60"),
            ("8-02", "0A"),
        ],
    )
    def test_well_formed_values(self, catalog, code: str, value: str) -> None:
        """Test that well-formed values pass the format check."""
        assert ValueCodec().check_format(value, catalog[code]) is None

    @pytest.mark.parametrize(
        "code,value",
        [
            ("1-02", "abc"),
            ("1-02", "95"),
            ("1-00", "-41"),
            ("2-02", "24:00"),
            ("2-02", "2:30"),
            ("8-0B", "2"),
            ("8-0B", "true"),
            ("F-0D", "5"),
            ("4-05", "101"),
            ("8-02", "A"),
            ("8-02", "10.5"),
        ],
    )
    def test_malformed_values(self, catalog, code: str, value: str) -> None:
        """Test that malformed values fail the format check."""
        issue = ValueCodec().check_format(value, catalog[code])
        assert issue is not None
        assert issue.kind == ValidationErrorKind.FORMAT

    def test_format_message_names_setting_and_format(self, catalog) -> None:
        """Test the format error message."""
        issue = ValueCodec().check_format("5", catalog["F-0D"])
        assert issue.message == (
            "Invalid format for Pump operation mode. Expected format: One of: 0, 1, 2"
        )

    def test_non_string_value(self, catalog) -> None:
        """Test that non-string values are malformed."""
        assert ValueCodec().check_format(55, catalog["1-02"]) is not None  # type: ignore
