"""History operation models and their keyword tree form."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, List, Optional
from .keyword import Keyword


class OpType(Enum):
    """Function applied by an operation, named by its wire keyword."""
    READ = "r"
    WRITE = "w"
    TXN = "txn"

    @property
    def keyword(self) -> Keyword:
        return Keyword(self.value)


@dataclass(frozen=True)
class Op:
    """
    A single operation executed against a key-value store.
    
    Reads and writes travel as ``[:r key value]`` and ``[:w key value]``
    (a read's value is null until the result is known). A transaction is a
    list of such micro-operations with no leading type tag.
    """

    type: OpType
    key: Optional[int] = None
    value: Optional[int] = None
    ops: tuple = field(default_factory=tuple)

    def __post_init__(self):
        """Validate operation after initialization."""
        self._validate()

    def _validate(self) -> None:
        if self.type is OpType.TXN:
            if self.key is not None or self.value is not None:
                raise ValueError("txn cannot carry a key or value")
            if not self.ops:
                raise ValueError("txn must contain at least one op")
            for op in self.ops:
                if not isinstance(op, Op):
                    raise ValueError(f"txn entries must be Op, got {type(op).__name__}")
            return

        if self.ops:
            raise ValueError(f"{self.type.value} cannot contain nested ops")
        if not _is_key(self.key):
            raise ValueError(f"key must be a non-negative integer, got {self.key!r}")
        if self.type is OpType.WRITE and not _is_key(self.value):
            raise ValueError(f"write value must be a non-negative integer, got {self.value!r}")
        if self.value is not None and not _is_key(self.value):
            raise ValueError(f"read value must be a non-negative integer, got {self.value!r}")

    @classmethod
    def read(cls, key: int, value: Optional[int] = None) -> 'Op':
        return cls(OpType.READ, key, value)

    @classmethod
    def write(cls, key: int, value: int) -> 'Op':
        return cls(OpType.WRITE, key, value)

    @classmethod
    def txn(cls, ops: List['Op']) -> 'Op':
        return cls(OpType.TXN, ops=tuple(ops))

    def to_tree(self) -> List[Any]:
        """Convert operation to a generic tree holding Keywords."""
        if self.type is OpType.TXN:
            return [op.to_tree() for op in self.ops]
        return [self.type.keyword, self.key, self.value]

    @classmethod
    def from_tree(cls, tree: Any) -> 'Op':
        """
        Create an Op from a decoded generic tree.
        
        Args:
            tree: List as produced by KeywordCodec.decode
        
        Returns:
            Op instance
        
        Raises:
            ValueError: If the tree is not a valid operation
        """
        if not isinstance(tree, list) or not tree:
            raise ValueError(f"Invalid operation tree: {tree!r}")

        # A tagged read or write starts with its keyword; a txn starts with a list
        head = tree[0]
        if isinstance(head, list):
            return cls.txn([cls.from_tree(item) for item in tree])

        if not isinstance(head, Keyword):
            raise ValueError(f"Unknown op type: {head!r}")
        if len(tree) != 3:
            raise ValueError(f"Operation must have 3 elements, got {len(tree)}")

        _, key, value = tree
        if not _is_key(key):
            raise ValueError(f"Invalid key: {key!r}")

        if head == OpType.READ.keyword:
            return cls.read(key, value if _is_key(value) else None)
        if head == OpType.WRITE.keyword:
            if not _is_key(value):
                raise ValueError(f"Invalid value: {value!r}")
            return cls.write(key, value)
        raise ValueError(f"Unknown op type: {head!r}")


@dataclass
class Ops:
    """An ordered list of operations."""

    items: List[Op] = field(default_factory=list)

    def __iter__(self) -> Iterator[Op]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Op:
        return self.items[index]

    def append(self, op: Op) -> None:
        self.items.append(op)

    def rev(self) -> 'Ops':
        """Get a copy with the operations in reverse order."""
        return Ops(list(reversed(self.items)))

    def to_tree(self) -> List[Any]:
        return [op.to_tree() for op in self.items]

    @classmethod
    def from_tree(cls, tree: Any) -> 'Ops':
        if not isinstance(tree, list):
            raise ValueError(f"Operations must be a list, got {type(tree).__name__}")
        return cls([Op.from_tree(item) for item in tree])


def _is_key(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0
