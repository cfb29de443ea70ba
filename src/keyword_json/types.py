"""Core type definitions for the keyword JSON codec."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class NodeKind(Enum):
    """Enumeration of generic tree node kinds."""
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    KEYWORD = "keyword"
    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    NULL = "null"
    OPAQUE = "opaque"


class ErrorType(Enum):
    """Enumeration of error types."""
    PARSE = "parse"
    SERIALIZATION = "serialization"


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


class CodecError(Exception):
    """Base exception for encode and decode failures."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context or {}


class ParseError(CodecError, ValueError):
    """Raised when input text is not valid JSON."""

    def __init__(self, message: str, lineno: Optional[int] = None,
                 colno: Optional[int] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorType.PARSE, context)
        self.lineno = lineno
        self.colno = colno


class SerializationError(CodecError, TypeError):
    """Raised when a tree holds a value the JSON engine cannot represent."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorType.SERIALIZATION, context)


# Abstract base classes for interfaces

class KeywordCodecInterface(ABC):
    """Abstract interface for the keyword codec."""

    @abstractmethod
    def encode(self, tree: Any) -> str:
        """Encode a generic tree into JSON text."""
        pass

    @abstractmethod
    def decode(self, text: Union[str, bytes, bytearray]) -> Any:
        """Decode JSON text into a generic tree."""
        pass

    @abstractmethod
    def decode_as_sequence(self, text: Union[str, bytes, bytearray]) -> Any:
        """Decode JSON text, materializing a top-level sequence as a list."""
        pass
