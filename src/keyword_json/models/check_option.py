"""Consistency checker option and result models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional
from .keyword import Keyword


DEFAULT_DIRECTORY = "./out"


class ConsistencyModel(Enum):
    """Canonical consistency model names."""
    CONSISTENT_VIEW = "consistent-view"
    CONFLICT_SERIALIZABLE = "conflict-serializable"
    CURSOR_STABILITY = "cursor-stability"
    FORWARD_CONSISTENT_VIEW = "forward-consistent-view"
    MONOTONIC_SNAPSHOT_READ = "monotonic-snapshot-read"
    MONOTONIC_VIEW = "monotonic-view"
    READ_COMMITTED = "read-committed"
    READ_UNCOMMITTED = "read-uncommitted"
    REPEATABLE_READ = "repeatable-read"
    SERIALIZABLE = "serializable"
    SNAPSHOT_ISOLATION = "snapshot-isolation"
    STRICT_SERIALIZABLE = "strict-serializable"
    STRONG_SERIALIZABLE = "strong-serializable"
    UPDATE_SERIALIZABLE = "update-serializable"
    STRONG_SESSION_READ_UNCOMMITTED = "strong-session-read-uncommitted"
    STRONG_SESSION_READ_COMMITTED = "strong-session-read-committed"
    STRONG_READ_UNCOMMITTED = "strong-read-uncommitted"
    STRONG_READ_COMMITTED = "strong-read-committed"

    @property
    def keyword(self) -> Keyword:
        return Keyword(self.value)

    @classmethod
    def from_keyword(cls, keyword: Any) -> 'ConsistencyModel':
        if not isinstance(keyword, Keyword):
            raise ValueError(f"Consistency model must be a keyword, got {keyword!r}")
        return cls(keyword.name)


class ValidType(Enum):
    """The ``:valid?`` value of a check result."""
    TRUE = True
    FALSE = False
    UNKNOWN = "unknown"

    @classmethod
    def from_tree(cls, value: Any) -> 'ValidType':
        if value is True:
            return cls.TRUE
        if value is False:
            return cls.FALSE
        if value == "unknown":
            return cls.UNKNOWN
        raise ValueError(f"Invalid :valid? value: {value!r}")

    def to_tree(self) -> Any:
        return self.value


@dataclass
class CheckOption:
    """
    Options passed to a consistency checker.
    
    The tree form uses keyword keys, and unset optional fields are left out.
    """

    consistency_models: Optional[ConsistencyModel] = None
    directory: str = DEFAULT_DIRECTORY
    anomalies: Optional[List[str]] = None
    analyzer: Optional[str] = None

    def to_tree(self) -> Dict[Keyword, Any]:
        """Convert options to a generic tree with keyword keys."""
        tree = {}
        if self.consistency_models is not None:
            tree[Keyword("consistency-models")] = self.consistency_models.keyword
        tree[Keyword("directory")] = self.directory
        if self.anomalies is not None:
            tree[Keyword("anomalies")] = list(self.anomalies)
        if self.analyzer is not None:
            tree[Keyword("analyzer")] = self.analyzer
        return tree

    @classmethod
    def from_tree(cls, tree: Dict[Any, Any]) -> 'CheckOption':
        """Create CheckOption from a decoded tree."""
        if not isinstance(tree, dict):
            raise ValueError(f"Check options must be a mapping, got {type(tree).__name__}")

        model = tree.get(Keyword("consistency-models"))
        anomalies = tree.get(Keyword("anomalies"))
        return cls(
            consistency_models=ConsistencyModel.from_keyword(model) if model is not None else None,
            directory=tree.get(Keyword("directory"), DEFAULT_DIRECTORY),
            anomalies=list(anomalies) if anomalies is not None else None,
            analyzer=tree.get(Keyword("analyzer"))
        )


@dataclass
class CheckResult:
    """Result reported by a consistency checker."""

    valid: ValidType
    anomaly_types: List[str] = field(default_factory=list)
    anomalies: Any = None
    not_: List[str] = field(default_factory=list)
    also_not: List[str] = field(default_factory=list)

    def is_valid(self) -> bool:
        return self.valid is ValidType.TRUE

    def to_tree(self) -> Dict[Keyword, Any]:
        return {
            Keyword("valid?"): self.valid.to_tree(),
            Keyword("anomaly-types"): list(self.anomaly_types),
            Keyword("anomalies"): self.anomalies,
            Keyword("not"): list(self.not_),
            Keyword("also-not"): list(self.also_not),
        }

    @classmethod
    def from_tree(cls, tree: Dict[Any, Any]) -> 'CheckResult':
        """
        Create CheckResult from a decoded tree.
        
        Keyword members of the name lists (e.g. ``:G1c``) are read back
        as their plain names.
        
        Raises:
            ValueError: If ``:valid?`` is missing or invalid
        """
        if not isinstance(tree, dict):
            raise ValueError(f"Check result must be a mapping, got {type(tree).__name__}")
        if Keyword("valid?") not in tree:
            raise ValueError("Check result is missing :valid?")

        return cls(
            valid=ValidType.from_tree(tree[Keyword("valid?")]),
            anomaly_types=_names(tree.get(Keyword("anomaly-types"), [])),
            anomalies=tree.get(Keyword("anomalies")),
            not_=_names(tree.get(Keyword("not"), [])),
            also_not=_names(tree.get(Keyword("also-not"), []))
        )


def _names(values: List[Any]) -> List[str]:
    return [value.name if isinstance(value, Keyword) else value for value in values]
