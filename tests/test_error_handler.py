"""Tests for error handler."""

import json
import pytest
from keyword_json.error_handler import ErrorHandler, MAX_DESCRIPTION_LENGTH
from keyword_json.types import ErrorType, ParseError, SerializationError


class TestErrorHandler:
    """Tests for ErrorHandler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.error_handler = ErrorHandler()

    def test_validate_input_valid_json(self):
        """Test validation of valid JSON input."""
        result = self.error_handler.validate_input('{"status": ":ok"}')

        assert result.is_valid
        assert len(result.errors) == 0

    def test_validate_input_invalid_json(self):
        """Test validation of invalid JSON input."""
        result = self.error_handler.validate_input('{"status": ":ok"')  # Missing closing brace

        assert not result.is_valid
        assert len(result.errors) == 1
        assert result.errors[0].type == ErrorType.PARSE
        assert result.errors[0].location.startswith("line 1")

    def test_validate_input_empty(self):
        """Test validation of blank input."""
        result = self.error_handler.validate_input("   ")

        assert not result.is_valid
        assert result.errors[0].message == "JSON string is empty"

    def test_validate_input_bytes(self):
        """Test validation of UTF-8 bytes."""
        assert self.error_handler.validate_input(b"[1, 2]").is_valid

    def test_validate_input_invalid_utf8(self):
        """Test validation of undecodable bytes."""
        result = self.error_handler.validate_input(b"\xff")

        assert not result.is_valid
        assert "UTF-8" in result.errors[0].message

    def test_parse_error_from_decode_error(self):
        """Test building a ParseError from the engine's exception."""
        with pytest.raises(json.JSONDecodeError) as exc_info:
            json.loads("[1,\n")

        error = self.error_handler.parse_error(exc_info.value)

        assert isinstance(error, ParseError)
        assert error.error_type == ErrorType.PARSE
        assert error.lineno == 2
        assert error.context["position"] == exc_info.value.pos

    def test_serialization_error(self):
        """Test building a SerializationError for an offending value."""
        error = self.error_handler.serialization_error({1, 2}, "not JSON")

        assert isinstance(error, SerializationError)
        assert error.error_type == ErrorType.SERIALIZATION
        assert str(error) == "Cannot serialize set {1, 2}: not JSON"
        assert error.context["value"] == "set {1, 2}"

    def test_describe_truncates(self):
        """Test that long descriptions are shortened."""
        description = ErrorHandler.describe("x" * 1000)

        assert len(description) == MAX_DESCRIPTION_LENGTH
        assert description.endswith("...")

    def test_parse_error_from_recursion_error(self):
        """Test building a ParseError for input nested too deeply for the engine."""
        error = self.error_handler.parse_error(RecursionError("maximum recursion depth exceeded"))

        assert isinstance(error, ParseError)
        assert "nesting too deep" in str(error)
        assert error.lineno is None
