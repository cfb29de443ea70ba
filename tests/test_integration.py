"""Integration tests for keyword round-tripping."""

import pytest
from keyword_json import KeywordCodec, Keyword, Op, Ops, encode, decode


class TestRoundTrip:
    """End-to-end encode/decode tests."""

    def test_plain_tree_round_trip(self, plain_tree):
        """Test that trees without keyword-like strings survive unchanged."""
        assert decode(encode(plain_tree)) == plain_tree

    def test_keyword_tree_round_trip(self, keyword_tree):
        """Test that keywords survive as keys and values."""
        assert decode(encode(keyword_tree)) == keyword_tree

    @pytest.mark.parametrize("name", ["ok", "read-committed", "valid?", "a/b", "ünï"])
    def test_keyword_law(self, name):
        """Test that a keyword value comes back as the same keyword."""
        tree = {"key": Keyword(name)}

        assert decode(encode(tree)) == tree

    def test_sentinel_string_is_read_as_keyword(self):
        """Test the documented ambiguity of strings starting with ':'."""
        text = encode(":foo")

        assert text == '":foo"'
        assert decode(text) == Keyword("foo")
        assert decode(text) != ":foo"

    def test_end_to_end_example(self):
        """Test the status/count example in both directions."""
        text = encode({"status": Keyword("ok"), "count": 3})
        data = decode(text)

        assert text == '{"status":":ok","count":3}'
        assert data == {"status": Keyword("ok"), "count": 3}
        assert type(data["count"]) is int

    def test_reencode_is_stable(self, keyword_tree):
        """Test that decode then encode reproduces the same text."""
        text = encode(keyword_tree)

        assert encode(decode(text)) == text

    def test_history_round_trip(self):
        """Test a history of transactions through the codec."""
        codec = KeywordCodec()
        ops = Ops([
            Op.txn([Op.write(1, 10), Op.read(2, 20)]),
            Op.txn([Op.read(1)]),
        ])

        decoded = Ops.from_tree(codec.decode_as_sequence(codec.encode(ops.to_tree())))

        assert decoded == ops
