"""Tests for height conversion and parsing."""

from __future__ import annotations

import pytest

from rooted.profiles.height import (
    HeightValue,
    convert_from_inches,
    convert_height,
    convert_to_inches,
    format_height,
    is_valid_height,
    parse_height_input,
)


class TestConvertToInches:
    """Tests for convert_to_inches."""

    def test_inches_identity(self) -> None:
        assert convert_to_inches(HeightValue(value=70, unit="in")) == 70

    def test_centimeters(self) -> None:
        assert convert_to_inches(HeightValue(value=177.8, unit="cm")) == pytest.approx(70)

    def test_feet_uses_decomposition(self) -> None:
        """ft values are computed from feet and inches, not value."""
        height = HeightValue(value=0, unit="ft", feet=5, inches=10)
        assert convert_to_inches(height) == 70

    def test_feet_missing_parts_default_to_zero(self) -> None:
        assert convert_to_inches(HeightValue(value=0, unit="ft", feet=6)) == 72

    def test_unknown_unit_passes_through(self) -> None:
        assert convert_to_inches(HeightValue(value=1.8, unit="m")) == 1.8


class TestConvertFromInches:
    """Tests for convert_from_inches."""

    def test_to_centimeters(self) -> None:
        result = convert_from_inches(70, "cm")
        assert result.unit == "cm"
        assert result.value == pytest.approx(177.8)

    def test_to_feet_splits(self) -> None:
        result = convert_from_inches(70.5, "ft")
        assert result.unit == "ft"
        assert result.value == 70.5
        assert result.feet == 5
        assert result.inches == pytest.approx(10.5)

    def test_unknown_unit_returns_inches(self) -> None:
        result = convert_from_inches(70, "yd")
        assert result.unit == "in"
        assert result.value == 70


class TestRoundTrip:
    """Converting to another unit and back returns the original value."""

    @pytest.mark.parametrize("source", [
        HeightValue(value=70, unit="in"),
        HeightValue(value=163.5, unit="cm"),
        HeightValue(value=61.25, unit="in"),
        HeightValue(value=70, unit="ft", feet=5, inches=10),
        HeightValue(value=62.5, unit="ft", feet=5, inches=2.5),
    ])
    @pytest.mark.parametrize("target_unit", ["in", "cm", "ft"])
    def test_round_trip(self, source: HeightValue, target_unit: str) -> None:
        converted = convert_height(source, target_unit)
        back = convert_height(converted, source.unit)
        assert back.value == pytest.approx(source.value, abs=1e-6)
        assert convert_to_inches(back) == pytest.approx(convert_to_inches(source), abs=1e-6)


class TestParseHeightInput:
    """Tests for parse_height_input."""

    def test_feet_apostrophe(self) -> None:
        result = parse_height_input("5'10", "ft")
        assert result == HeightValue(value=70, unit="ft", feet=5, inches=10)

    @pytest.mark.parametrize("text", ["5 10", "5ft 10in", "5'10\"", "5 feet 10 inches"])
    def test_feet_variants(self, text: str) -> None:
        result = parse_height_input(text, "ft")
        assert result is not None
        assert result.feet == 5
        assert result.inches == 10
        assert result.value == 70

    def test_feet_only(self) -> None:
        result = parse_height_input("6", "ft")
        assert result is not None
        assert result.value == 72
        assert result.inches == 0

    def test_decimal_feet(self) -> None:
        """A decimal number of feet is split into feet and inches."""
        result = parse_height_input("5.5", "ft")
        assert result is not None
        assert result.feet == 5
        assert result.inches == pytest.approx(6)
        assert result.value == pytest.approx(66)

    def test_centimeters_with_suffix(self) -> None:
        result = parse_height_input("178 cm", "cm")
        assert result == HeightValue(value=178, unit="cm")

    def test_inches(self) -> None:
        assert parse_height_input(" 70.5 ", "in") == HeightValue(value=70.5, unit="in")

    @pytest.mark.parametrize("text,unit", [
        ("", "in"),
        ("abc", "cm"),
        ("0", "in"),
        ("0", "ft"),
        ("tall", "ft"),
    ])
    def test_invalid_returns_none(self, text: str, unit: str) -> None:
        assert parse_height_input(text, unit) is None


class TestIsValidHeight:
    """Tests for the 48-96 inch plausibility bound."""

    def test_bounds_inclusive(self) -> None:
        assert is_valid_height(HeightValue(value=48, unit="in"))
        assert is_valid_height(HeightValue(value=96, unit="in"))

    def test_outside_bounds(self) -> None:
        assert not is_valid_height(HeightValue(value=47.9, unit="in"))
        assert not is_valid_height(HeightValue(value=250, unit="cm"))

    def test_feet(self) -> None:
        assert is_valid_height(HeightValue(value=70, unit="ft", feet=5, inches=10))


class TestFormatHeight:
    """Tests for format_height."""

    def test_formats(self) -> None:
        assert format_height(HeightValue(value=70, unit="in")) == "70.0 in"
        assert format_height(HeightValue(value=177.8, unit="cm")) == "177.8 cm"
        assert format_height(HeightValue(value=70, unit="ft", feet=5, inches=10)) == "5' 10.0\""

    def test_unknown_unit(self) -> None:
        assert format_height(HeightValue(value=1.8, unit="m")) == "1.8 m"
