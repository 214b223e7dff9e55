"""Tests for the number classifier."""

import pytest
from json_configuration.number_classifier import NumberClassifier
from json_configuration.parser import JsonNumber
from json_configuration.types import NumberKind


class TestNumberClassifier:
    """Tests for NumberClassifier class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.classifier = NumberClassifier()

    def test_small_integer_is_int(self):
        """Test that a token fitting 32 bits classifies as int."""
        result = self.classifier.classify("42")

        assert result.kind == NumberKind.INT
        assert result.value == 42
        assert isinstance(result.value, int)

    def test_large_integer_is_long(self):
        """Test that a token exceeding 32 bits classifies as long."""
        result = self.classifier.classify("9999999999")

        assert result.kind == NumberKind.LONG
        assert result.value == 9999999999

    def test_decimal_is_double(self):
        """Test that a decimal token classifies as double."""
        result = self.classifier.classify("3.14")

        assert result.kind == NumberKind.DOUBLE
        assert result.value == 3.14

    def test_out_of_double_range_is_dropped(self):
        """Test that a token beyond the double range yields no value."""
        assert self.classifier.classify("1e400") is None
        assert self.classifier.parse_number("-1e400") is None

    @pytest.mark.parametrize("token,kind", [
        ("2147483647", NumberKind.INT),
        ("2147483648", NumberKind.LONG),
        ("-2147483648", NumberKind.INT),
        ("-2147483649", NumberKind.LONG),
        ("9223372036854775807", NumberKind.LONG),
        ("9223372036854775808", NumberKind.DOUBLE),
        ("-9223372036854775808", NumberKind.LONG),
    ])
    def test_width_boundaries(self, token, kind):
        """Test classification at the 32-bit and 64-bit boundaries."""
        assert self.classifier.classify(token).kind == kind

    def test_integral_value_with_fraction_is_double(self):
        """Test that 1.0 stays a double rather than narrowing to int."""
        result = self.classifier.classify(JsonNumber("1.0"))

        assert result.kind == NumberKind.DOUBLE
        assert isinstance(result.value, float)

    def test_exponent_is_double(self):
        """Test that an exponent makes a token a double."""
        result = self.classifier.classify("1e2")

        assert result.kind == NumberKind.DOUBLE
        assert result.value == 100.0

    def test_malformed_token_is_dropped(self):
        """Test that a token that is not a number yields no value."""
        assert self.classifier.classify("twelve") is None

    def test_non_finite_tokens_are_dropped(self):
        """Test that hand-built NaN and Infinity tokens yield no value."""
        assert self.classifier.classify("NaN") is None
        assert self.classifier.classify("Infinity") is None

    def test_integer_beyond_digit_limit_is_dropped(self):
        """Test that an integer token too long to convert yields no value."""
        assert self.classifier.classify("9" * 5000) is None
        assert self.classifier.classify("-" + "1" * 4301) is None

    def test_parse_number_returns_value_only(self):
        """Test that parse_number unwraps the classified value."""
        assert self.classifier.parse_number("-7") == -7
        assert self.classifier.parse_number("2.5") == 2.5
