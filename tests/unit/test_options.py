"""Unit tests for ConversionOptions and the exception hierarchy."""

import dataclasses

import pytest

from html2md import ConversionOptions, Html2MdError, InvalidInputError, ValidationError


@pytest.mark.unit
class TestConversionOptions:
    """Tests for option defaults, validation and cloning."""

    def test_defaults(self):
        options = ConversionOptions()
        assert options.unordered_list_marker == "-"
        assert options.ordered_list_delimiter == "."
        assert options.emphasis_symbol == "*"
        assert options.include_title is True
        assert options.use_hash_headings is True
        assert options.escape_special_characters is False
        assert options.remove_images is False
        assert options.split_lines is False
        assert options.soft_break == 80
        assert options.hard_break == 100
        assert options.format_tables is False

    def test_frozen(self):
        options = ConversionOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.remove_images = True

    def test_create_updated_returns_new_instance(self):
        options = ConversionOptions()
        updated = options.create_updated(unordered_list_marker="+", format_tables=True)
        assert updated is not options
        assert updated.unordered_list_marker == "+"
        assert updated.format_tables is True
        assert options.unordered_list_marker == "-"

    def test_create_updated_validates(self):
        with pytest.raises(ValueError, match="emphasis_symbol"):
            ConversionOptions().create_updated(emphasis_symbol="~")

    @pytest.mark.parametrize(
        "kwargs,fragment",
        [
            ({"unordered_list_marker": "#"}, "unordered_list_marker"),
            ({"ordered_list_delimiter": ":"}, "ordered_list_delimiter"),
            ({"emphasis_symbol": "**"}, "emphasis_symbol"),
            ({"soft_break": 0}, "soft_break"),
            ({"soft_break": 50, "hard_break": 40}, "hard_break"),
        ],
    )
    def test_invalid_values(self, kwargs, fragment):
        with pytest.raises(ValueError, match=fragment):
            ConversionOptions(**kwargs)

    def test_every_field_has_help(self):
        for option_field in dataclasses.fields(ConversionOptions):
            assert option_field.metadata.get("help"), option_field.name


@pytest.mark.unit
class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_invalid_input_is_type_error(self):
        error = InvalidInputError("bad input", input_type=int)
        assert isinstance(error, Html2MdError)
        assert isinstance(error, TypeError)
        assert error.input_type is int
        assert error.message == "bad input"
        assert str(error) == "bad input"

    def test_validation_error_details(self):
        cause = ValueError("boom")
        error = ValidationError("invalid", parameter_name="options", parameter_value=3, original_error=cause)
        assert isinstance(error, Html2MdError)
        assert error.parameter_name == "options"
        assert error.parameter_value == 3
        assert error.original_error is cause
