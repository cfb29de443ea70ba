"""Codec configuration."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


DEFAULT_SENTINEL = ":"


@dataclass(frozen=True)
class CodecConfig:
    """
    Settings for a KeywordCodec instance.
    
    Defaults produce compact output (no whitespace between tokens) and
    normalize every decoded number to a plain ``int`` or ``float``.
    """

    sentinel: str = DEFAULT_SENTINEL
    normalize_numbers: bool = True
    sort_keys: bool = False
    ensure_ascii: bool = False
    indent: Optional[int] = None
    separators: Tuple[str, str] = field(default=(",", ":"))
    allow_nan: bool = True

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        if not isinstance(self.sentinel, str) or not self.sentinel:
            raise ValueError("sentinel must be a non-empty string")

        if self.indent is not None and self.indent < 0:
            raise ValueError("indent must be non-negative")

        if len(self.separators) != 2:
            raise ValueError("separators must be an (item, key) pair")

    def dumps_options(self) -> Dict[str, Any]:
        """Keyword arguments for ``json.dumps``."""
        return {
            "sort_keys": self.sort_keys,
            "ensure_ascii": self.ensure_ascii,
            "indent": self.indent,
            "separators": tuple(self.separators),
            "allow_nan": self.allow_nan,
        }
