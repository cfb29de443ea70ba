"""Keyword (symbolic key) model."""

from dataclasses import dataclass
from ..config import DEFAULT_SENTINEL


@dataclass(frozen=True, order=True)
class Keyword:
    """
    A symbolic name, distinct from a plain string.
    
    Keywords are hashable and can be used both as mapping keys and as
    values. On the wire a keyword is a JSON string holding the sentinel
    followed by the name, e.g. ``Keyword("ok")`` travels as ``":ok"``.
    """

    name: str

    def __post_init__(self):
        """Validate keyword after initialization."""
        if not isinstance(self.name, str):
            raise ValueError(f"Keyword name must be a string, got {type(self.name).__name__}")

    def __str__(self) -> str:
        return self.to_wire()

    def __repr__(self) -> str:
        return f"Keyword({self.name!r})"

    def to_wire(self, sentinel: str = DEFAULT_SENTINEL) -> str:
        """Get the string form used inside JSON text."""
        return sentinel + self.name

    @classmethod
    def from_wire(cls, text: str, sentinel: str = DEFAULT_SENTINEL) -> 'Keyword':
        """
        Create a Keyword from its wire string.
        
        Args:
            text: String starting with the sentinel
            sentinel: Marker prefix
        
        Returns:
            Keyword instance
        
        Raises:
            ValueError: If text does not start with the sentinel
        """
        if not cls.is_wire(text, sentinel):
            raise ValueError(f"{text!r} does not start with {sentinel!r}")
        return cls(text[len(sentinel):])

    @staticmethod
    def is_wire(value: object, sentinel: str = DEFAULT_SENTINEL) -> bool:
        """Check if a value is a string in keyword wire form."""
        return isinstance(value, str) and value.startswith(sentinel)
