from calcparse.parser.facade import Parser, deserialize, deserialize_json, is_valid, parse
from calcparse.parser.shunting_yard import to_postfix
from calcparse.parser.tokenizer import parse_decimal_prefix, tokenize
from calcparse.parser.tree_builder import build_tree

__all__ = [
    "Parser", "parse", "deserialize", "deserialize_json", "is_valid",
    "tokenize", "parse_decimal_prefix", "to_postfix", "build_tree",
]
