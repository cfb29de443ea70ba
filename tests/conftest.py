"""Pytest configuration and fixtures."""

import pytest
from keyword_json.codec import KeywordCodec
from keyword_json.models import Keyword


@pytest.fixture
def codec():
    """Codec with default settings."""
    return KeywordCodec()


@pytest.fixture
def plain_tree():
    """Tree without keywords or sentinel-prefixed strings."""
    return {
        "name": "register",
        "count": 3,
        "ratio": 0.25,
        "enabled": True,
        "missing": None,
        "items": [1, 2, {"nested": ["a", "b"]}],
        "empty": {},
    }


@pytest.fixture
def keyword_tree():
    """Tree with keywords as keys and values."""
    return {
        Keyword("type"): Keyword("invoke"),
        Keyword("f"): Keyword("txn"),
        Keyword("value"): [[Keyword("w"), 6, 1], [Keyword("r"), 8, None]],
        Keyword("process"): 0,
        "note": "plain",
    }


@pytest.fixture
def history_json():
    """Encoded list of transactions."""
    return (
        '[[[":w",6,1],[":w",8,1]],[[":w",9,1],[":r",8,null]],'
        '[[":w",6,2],[":r",6,null]],[[":w",9,2]],[[":r",8,null],[":w",9,3]]]'
    )
