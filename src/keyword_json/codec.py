"""Keyword-aware JSON encoder and decoder."""

import json
import logging
import math
from collections.abc import Iterator, Sequence
from typing import Any, Optional, Union
from .types import KeywordCodecInterface, NodeKind, SerializationError
from .config import CodecConfig
from .error_handler import ErrorHandler
from .models.keyword import Keyword
from .walker import postwalk


JSON_KEY_KINDS = frozenset([
    NodeKind.KEYWORD,
    NodeKind.STRING,
    NodeKind.INTEGER,
    NodeKind.FLOAT,
    NodeKind.BOOLEAN,
    NodeKind.NULL,
])


class KeywordCodec(KeywordCodecInterface):
    """
    JSON codec that carries keywords through plain JSON strings.
    
    Keywords are written as strings prefixed with the configured sentinel
    (``":"`` by default) and every string carrying that prefix is read back
    as a Keyword. A plain string that already starts with the sentinel is
    therefore read back as a Keyword, not as the original string.
    """

    def __init__(self, config: Optional[CodecConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the codec.
        
        Args:
            config: Optional codec settings (defaults to CodecConfig())
            logger: Optional logger instance
        """
        self.config = config or CodecConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = ErrorHandler(self.logger)

    def encode(self, tree: Any) -> str:
        """
        Encode a generic tree into JSON text.
        
        Args:
            tree: Tree of dicts, lists, tuples, strings, numbers, booleans,
                None and Keywords
        
        Returns:
            JSON text
        
        Raises:
            SerializationError: If the tree holds a value JSON cannot represent
        """
        generic = self.to_tree(tree)

        try:
            text = json.dumps(generic, default=self._reject, **self.config.dumps_options())
        except RecursionError as e:
            raise self.error_handler.serialization_error(tree, "nesting too deep") from e
        except ValueError as e:
            # Integers past the interpreter's string conversion limit
            raise self.error_handler.serialization_error(tree, str(e)) from e

        self.logger.debug(f"Encoded tree into {len(text)} characters")
        return text

    def decode(self, text: Union[str, bytes, bytearray]) -> Any:
        """
        Decode JSON text into a generic tree.
        
        Args:
            text: JSON text (bytes are read as UTF-8)
        
        Returns:
            Decoded tree with keyword strings turned into Keywords
        
        Raises:
            ParseError: If text is not valid JSON
        """
        try:
            if isinstance(text, (bytes, bytearray)):
                text = bytes(text).decode("utf-8")
            data = json.loads(text)
        except (ValueError, RecursionError) as e:
            # JSONDecodeError and UnicodeDecodeError are ValueErrors
            raise self.error_handler.parse_error(e) from e

        tree = self.from_tree(data)
        self.logger.debug(f"Decoded {len(text)} characters")
        return tree

    def decode_as_sequence(self, text: Union[str, bytes, bytearray]) -> Any:
        """
        Decode JSON text, guaranteeing a top-level sequence is a list.
        
        Args:
            text: JSON text
        
        Returns:
            A list for sequence input, otherwise the decoded value unchanged
        """
        return self.as_sequence(self.decode(text))

    def to_tree(self, value: Any) -> Any:
        """
        Rewrite Keywords into sentinel strings without serializing.
        
        Args:
            value: Generic tree possibly holding Keywords
        
        Returns:
            New tree that the JSON engine can serialize
        """
        return postwalk(value, self._encode_leaf, self._encode_key, self._circular_reference)

    def from_tree(self, data: Any) -> Any:
        """
        Rewrite sentinel strings into Keywords in an already-parsed tree.
        
        Args:
            data: Generic tree as produced by the JSON engine
        
        Returns:
            New tree with Keywords and normalized numbers
        """
        return postwalk(data, self._decode_leaf, on_cycle=self._circular_reference)

    @staticmethod
    def as_sequence(data: Any) -> Any:
        """
        Materialize sequence-like values as a list.
        
        Lists are returned as-is; other sequences and iterators are copied
        into a new list; strings, mappings and scalars pass through.
        """
        if isinstance(data, list):
            return data
        if isinstance(data, (str, bytes, bytearray)):
            return data
        if isinstance(data, (Sequence, Iterator)):
            return list(data)
        return data

    def _encode_leaf(self, leaf: Any, kind: NodeKind) -> Any:
        if kind is NodeKind.KEYWORD:
            return leaf.to_wire(self.config.sentinel)
        if kind is NodeKind.FLOAT and not self.config.allow_nan and not math.isfinite(leaf):
            raise self.error_handler.serialization_error(leaf, "out of range float values are not JSON compliant")
        return leaf

    def _encode_key(self, key: Any, kind: NodeKind) -> Any:
        if kind not in JSON_KEY_KINDS:
            raise self.error_handler.serialization_error(
                key, "mapping keys must be str, int, float, bool, None or Keyword"
            )
        return self._encode_leaf(key, kind)

    def _decode_leaf(self, leaf: Any, kind: NodeKind) -> Any:
        if kind is NodeKind.STRING and leaf.startswith(self.config.sentinel):
            return Keyword.from_wire(leaf, self.config.sentinel)
        if self.config.normalize_numbers:
            # int() and float() drop subclasses such as IntEnum
            if kind is NodeKind.INTEGER:
                return int(leaf)
            if kind is NodeKind.FLOAT:
                return float(leaf)
        return leaf

    def _circular_reference(self, node: Any) -> SerializationError:
        return self.error_handler.serialization_error(node, "Circular reference detected")

    def _reject(self, value: Any) -> Any:
        raise self.error_handler.serialization_error(value)


_default_codec = KeywordCodec()


def encode(tree: Any) -> str:
    """Encode a tree with the default codec."""
    return _default_codec.encode(tree)


def decode(text: Union[str, bytes, bytearray]) -> Any:
    """Decode JSON text with the default codec."""
    return _default_codec.decode(text)


def decode_as_sequence(text: Union[str, bytes, bytearray]) -> Any:
    """Decode JSON text with the default codec, listifying a top-level sequence."""
    return _default_codec.decode_as_sequence(text)
