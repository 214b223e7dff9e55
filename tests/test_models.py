"""Tests for data models."""

import pytest
from json_configuration.models import JsonConfigurationOptions


class TestJsonConfigurationOptions:
    """Tests for JsonConfigurationOptions class."""

    def test_defaults(self):
        """Test default option values."""
        options = JsonConfigurationOptions()

        assert options.indent == 2
        assert options.path_separator == "."

    def test_negative_indent(self):
        """Test validation of a negative indent."""
        with pytest.raises(ValueError, match="indent cannot be negative"):
            JsonConfigurationOptions(indent=-1)

    def test_non_integer_indent(self):
        """Test validation of a non-integer indent."""
        with pytest.raises(ValueError, match="indent must be an integer"):
            JsonConfigurationOptions(indent="2")

    def test_invalid_path_separator(self):
        """Test validation of a multi-character separator."""
        with pytest.raises(ValueError, match="single character"):
            JsonConfigurationOptions(path_separator="::")

    def test_to_dict_conversion(self):
        """Test conversion to dictionary."""
        options = JsonConfigurationOptions(indent=4, path_separator="/")

        assert options.to_dict() == {
            "indent": 4,
            "pathSeparator": "/"
        }

    def test_from_dict_creation(self):
        """Test creation from dictionary."""
        options = JsonConfigurationOptions.from_dict({"indent": 0})

        assert options.indent == 0
        assert options.path_separator == "."
