#!/usr/bin/env python3
"""
Example usage of keyword-json.

This script shows keywords travelling through JSON text and coming back,
along with the history and checker-option models built on top.
"""

import logging
from keyword_json import (
    CheckOption,
    ConsistencyModel,
    Keyword,
    KeywordCodec,
    Op,
    Ops,
    ParseError,
    SerializationError,
)


def main():
    """Main example function."""
    logging.basicConfig(level=logging.DEBUG)
    codec = KeywordCodec()

    print("keyword-json Example")
    print("=" * 50)

    # Keywords as values and keys
    event = {
        Keyword("type"): Keyword("invoke"),
        Keyword("f"): Keyword("txn"),
        Keyword("process"): 0,
        "note": ":looks-like-a-keyword",
    }
    text = codec.encode(event)
    print(f"Encoded event: {text}")
    print(f"Decoded event: {codec.decode(text)}")
    print("Note: the plain ':looks-like-a-keyword' string came back as a Keyword")

    # History of transactions
    ops = Ops([
        Op.txn([Op.write(6, 1), Op.read(8)]),
        Op.txn([Op.write(9, 2)]),
    ])
    history = codec.encode(ops.to_tree())
    print(f"\nHistory: {history}")
    print(f"Reversed: {codec.encode(Ops.from_tree(codec.decode_as_sequence(history)).rev().to_tree())}")

    # Checker options
    option = CheckOption(consistency_models=ConsistencyModel.SERIALIZABLE, analyzer="wr-graph")
    print(f"\nCheck options: {codec.encode(option.to_tree())}")

    # Failures
    try:
        codec.decode('{"status": ":ok"')
    except ParseError as e:
        print(f"\n❌ {e}")

    try:
        codec.encode({"tags": {"a", "b"}})
    except SerializationError as e:
        print(f"❌ {e}")


if __name__ == "__main__":
    main()
