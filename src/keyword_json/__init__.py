"""
keyword-json - JSON encoding with keyword round-tripping.

Converts in-memory trees to and from JSON text, writing keywords as
strings prefixed with ``:`` and reading such strings back as keywords.
"""

from .codec import KeywordCodec, encode, decode, decode_as_sequence
from .config import CodecConfig
from .models import Keyword, Op, Ops, CheckOption, CheckResult, ConsistencyModel, ValidType
from .types import CodecError, ParseError, SerializationError

__version__ = "1.0.0"
__all__ = [
    "KeywordCodec",
    "encode",
    "decode",
    "decode_as_sequence",
    "CodecConfig",
    "Keyword",
    "Op",
    "Ops",
    "CheckOption",
    "CheckResult",
    "ConsistencyModel",
    "ValidType",
    "CodecError",
    "ParseError",
    "SerializationError",
]
