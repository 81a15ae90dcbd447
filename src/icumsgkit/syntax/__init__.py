"""Pattern tokenizer and token types.

Python 3.13+. Zero external dependencies.
"""

from .tokenizer import (
    BraceIndex,
    find_placeholder,
    match_brace,
    parse_branches,
    parse_construct,
    tokenize,
)
from .tokens import Branch, Construct, Junk, Placeholder, Span, TextElement, Token

__all__ = [
    "BraceIndex",
    "Branch",
    "Construct",
    "Junk",
    "Placeholder",
    "Span",
    "TextElement",
    "Token",
    "find_placeholder",
    "match_brace",
    "parse_branches",
    "parse_construct",
    "tokenize",
]
