"""Error handling implementation for the keyword codec."""

import json
import logging
from typing import Any, Optional, Union
from .types import (
    ValidationResult,
    ValidationError,
    ParseError,
    SerializationError,
    ErrorType
)


MAX_DESCRIPTION_LENGTH = 200


class ErrorHandler:
    """
    Error handler for codec operations.
    
    Turns JSON engine failures into ParseError and SerializationError,
    logging each one before it is raised, and provides a non-raising
    syntax check for callers that want to inspect input first.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.
        
        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: Union[str, bytes, bytearray]) -> ValidationResult:
        """
        Validate JSON text without raising.
        
        Args:
            input_data: JSON text to validate
        
        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if isinstance(input_data, (bytes, bytearray)):
            try:
                input_data = input_data.decode("utf-8")
            except UnicodeDecodeError as e:
                errors.append(ValidationError(
                    type=ErrorType.PARSE,
                    message=f"Input is not valid UTF-8: {e.reason}",
                    location=f"byte {e.start}"
                ))
                return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if not input_data.strip():
            errors.append(ValidationError(
                type=ErrorType.PARSE,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        try:
            json.loads(input_data)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.PARSE,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
        except RecursionError:
            errors.append(ValidationError(
                type=ErrorType.PARSE,
                message="JSON nesting too deep",
                location="input"
            ))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    def parse_error(self, error: Exception) -> ParseError:
        """
        Build a ParseError from a JSON engine failure.
        
        Args:
            error: Exception raised while parsing (JSONDecodeError,
                UnicodeDecodeError, RecursionError or ValueError)
        
        Returns:
            ParseError ready to be raised
        """
        if isinstance(error, json.JSONDecodeError):
            parse_error = ParseError(
                f"JSON parsing failed: {error.msg} at line {error.lineno}, column {error.colno}",
                lineno=error.lineno,
                colno=error.colno,
                context={"position": error.pos}
            )
        elif isinstance(error, UnicodeDecodeError):
            parse_error = ParseError(
                f"JSON parsing failed: input is not valid UTF-8 ({error.reason})",
                context={"position": error.start}
            )
        elif isinstance(error, RecursionError):
            parse_error = ParseError("JSON parsing failed: nesting too deep")
        else:
            parse_error = ParseError(f"JSON parsing failed: {error}")

        self.logger.error(f"Decode failed: {parse_error}")
        return parse_error

    def serialization_error(self, value: Any, reason: Optional[str] = None) -> SerializationError:
        """
        Build a SerializationError for a value the engine cannot represent.
        
        Args:
            value: Offending value
            reason: Optional detail from the engine
        
        Returns:
            SerializationError ready to be raised
        """
        description = self.describe(value)
        message = f"Cannot serialize {description}"
        if reason:
            message = f"{message}: {reason}"

        self.logger.error(f"Encode failed: {message}")
        return SerializationError(message, context={"value": description})

    @staticmethod
    def describe(value: Any) -> str:
        """Get a short printable description of a value."""
        text = f"{type(value).__name__} {value!r}"
        if len(text) > MAX_DESCRIPTION_LENGTH:
            text = text[:MAX_DESCRIPTION_LENGTH - 3] + "..."
        return text
