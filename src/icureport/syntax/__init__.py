"""ICU MessageFormat syntax: AST nodes and parser.

Public API:
    parse_message - Parse (and memoize) a template into a MessageAst
    IcuParser - Uncached parser with configurable nesting depth

Python 3.13+. Zero external dependencies.
"""

from .ast import (
    ArgumentElement,
    ArgumentFormat,
    MessageAst,
    MessageElement,
    NumberFormat,
    PluralFormat,
    PluralOption,
    PoundElement,
    SelectFormat,
    TextElement,
)
from .parser import IcuParser, clear_parse_cache, parse_message

__all__ = [
    "ArgumentElement",
    "ArgumentFormat",
    "IcuParser",
    "MessageAst",
    "MessageElement",
    "NumberFormat",
    "PluralFormat",
    "PluralOption",
    "PoundElement",
    "SelectFormat",
    "TextElement",
    "clear_parse_cache",
    "parse_message",
]
