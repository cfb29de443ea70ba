"""Data models for the keyword codec."""

from .keyword import Keyword
from .operation import Op, Ops, OpType
from .check_option import CheckOption, CheckResult, ConsistencyModel, ValidType

__all__ = [
    "Keyword",
    "Op",
    "Ops",
    "OpType",
    "CheckOption",
    "CheckResult",
    "ConsistencyModel",
    "ValidType",
]
